# services/bot_check.py
"""
reCAPTCHA score verification

The gate fails closed: anything other than a successful verification with a
score above the threshold counts as a failed check. There is no retry.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass
class BotCheckResult:
    passed: bool
    score: Optional[float] = None
    error_codes: List[str] = field(default_factory=list)
    reason: Optional[str] = None


class RecaptchaVerifier:
    """Forwards client tokens to the verification service"""

    def __init__(self,
                 secret_key: str,
                 verify_url: str = 'https://www.google.com/recaptcha/api/siteverify',
                 score_threshold: float = 0.5,
                 timeout: float = 10):
        self.secret_key = secret_key
        self.verify_url = verify_url
        self.score_threshold = score_threshold
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.secret_key)

    def verify(self, token: Optional[str], remote_ip: Optional[str] = None) -> BotCheckResult:
        if not token:
            return BotCheckResult(passed=False, reason='missing_token')

        payload = {'secret': self.secret_key, 'response': token}
        if remote_ip:
            payload['remoteip'] = remote_ip

        try:
            response = requests.post(self.verify_url, data=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except ValueError as e:
            logger.warning(f"Bot verification returned invalid JSON: {e}")
            return BotCheckResult(passed=False, reason='invalid_response')
        except requests.RequestException as e:
            logger.warning(f"Bot verification request failed: {e}")
            return BotCheckResult(passed=False, reason='transport_error')

        error_codes = body.get('error-codes', []) if isinstance(body, dict) else []
        if not isinstance(body, dict) or body.get('success') is not True:
            return BotCheckResult(passed=False, error_codes=error_codes, reason='rejected')

        score = body.get('score')
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            return BotCheckResult(passed=False, error_codes=error_codes, reason='missing_score')

        if not math.isfinite(score) or not score > self.score_threshold:
            return BotCheckResult(passed=False, score=score, reason='low_score')

        return BotCheckResult(passed=True, score=score)
