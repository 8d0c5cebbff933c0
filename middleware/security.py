# middleware/security.py
"""
Security middleware for intake requests
"""

from flask import request, current_app
from functools import wraps
import logging

from core.errors import BotCheckFailedError

logger = logging.getLogger(__name__)


def security_headers(response):
    """Add security headers to all responses"""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'DENY'
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'camera=(), microphone=(), geolocation=()'

    return response


def require_bot_check(f):
    """
    Decorator that gates a view behind the bot verifier

    Runs before the view body, so a failed check short-circuits field
    validation. Skipped entirely when no verification secret is configured.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        verifier = current_app.bot_verifier
        if verifier.enabled:
            token = request.form.get('recaptchaToken', '').strip()
            result = verifier.verify(token, request.remote_addr)

            if not result.passed:
                logger.warning(
                    f"Bot check failed for {request.remote_addr} on {request.endpoint}: "
                    f"reason={result.reason} score={result.score} errors={result.error_codes}"
                )
                raise BotCheckFailedError()

        return f(*args, **kwargs)
    return decorated_function
