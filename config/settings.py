# config/settings.py
"""
Environment-driven configuration for the landing page intake service
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration, read once at import time with hardcoded fallbacks"""

    VERSION = os.environ.get('APP_VERSION', '1.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # SMTP transport
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', 587))
    SMTP_USER = os.environ.get('SMTP_USER', '')
    SMTP_PASSWORD = os.environ.get('SMTP_PASS', '')
    SMTP_USE_TLS = _env_bool('SMTP_USE_TLS', SMTP_PORT == 465)
    # Implicit TLS and STARTTLS are mutually exclusive
    SMTP_STARTTLS = _env_bool('SMTP_STARTTLS', SMTP_PORT == 587) and not SMTP_USE_TLS
    SMTP_TIMEOUT = float(os.environ.get('SMTP_TIMEOUT', 60))

    # Envelope
    MAIL_FROM = os.environ.get('MAIL_FROM') or SMTP_USER or 'noreply@jubileeuganda.com'
    MAIL_RECIPIENT = os.environ.get('MAIL_RECIPIENT', 'george.kaggo@jubileeuganda.com')

    # Bot verification (disabled when no secret is set)
    RECAPTCHA_SECRET_KEY = os.environ.get('RECAPTCHA_SECRET_KEY', '')
    RECAPTCHA_VERIFY_URL = os.environ.get(
        'RECAPTCHA_VERIFY_URL', 'https://www.google.com/recaptcha/api/siteverify'
    )
    RECAPTCHA_SCORE_THRESHOLD = float(os.environ.get('RECAPTCHA_SCORE_THRESHOLD', 0.5))
    RECAPTCHA_TIMEOUT = float(os.environ.get('RECAPTCHA_TIMEOUT', 10))

    # Rate limiting
    INTAKE_RATE_LIMIT = os.environ.get('INTAKE_RATE_LIMIT', '5 per 15 minutes')
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_STRATEGY = 'fixed-window'
    RATELIMIT_ENABLED = _env_bool('RATELIMIT_ENABLED', True)
    RATELIMIT_HEADERS_ENABLED = True

    # Response policy: False answers every intake request with HTTP 200
    INTAKE_HTTP_STATUS_CODES = _env_bool('INTAKE_HTTP_STATUS_CODES', False)

    # Uploads
    MAX_ATTACHMENT_BYTES = 10 * 1024 * 1024  # 10MB
    MAX_CONTENT_LENGTH = 12 * 1024 * 1024
    ALLOWED_ATTACHMENT_TYPES = ('application/pdf', 'image/jpeg', 'image/jpg', 'image/png')

    # Notification content
    JOB_POSITION = os.environ.get('JOB_POSITION', 'Sales Agent')
    INTAKE_SOURCE_LABEL = os.environ.get(
        'INTAKE_SOURCE_LABEL', 'Jubilee Health Insurance Landing Page'
    )

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')

    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """Deterministic settings for the test suite"""

    TESTING = True
    RECAPTCHA_SECRET_KEY = ''
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = 'memory://'
    INTAKE_RATE_LIMIT = '5 per 15 minutes'
    INTAKE_HTTP_STATUS_CODES = False
    MAIL_FROM = 'noreply@example.com'
    MAIL_RECIPIENT = 'operator@example.com'
    CORS_ORIGINS = ['*']
    LOG_FILE = None


class ProductionConfig(Config):
    pass


CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}
