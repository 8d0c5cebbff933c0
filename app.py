# app.py
"""
Flask application factory for the landing page intake service

Wires together:
- Intake blueprint (job applications, insurance inquiries)
- Per-client rate limiting shared across intake endpoints
- Optional reCAPTCHA gate
- Jinja2 notification composer and SMTP mail dispatcher
- Uniform JSON error handling and logging
"""

import os
import logging
import logging.handlers
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_limiter.errors import RateLimitExceeded
from werkzeug.exceptions import HTTPException

from api.intake import intake_bp, limiter, intake_response
from config.settings import CONFIGS
from core.template_engine import NotificationComposer
from core.validators import IntakeValidator
from middleware.security import security_headers
from services.bot_check import RecaptchaVerifier
from services.mailer import MailDispatcher, SMTPSettings

RATE_LIMIT_MESSAGE = 'Too many submissions. Please try again later.'


def setup_logging(app: Flask) -> None:
    """
    Configure application logging

    Logs go to stderr, and additionally to a rotating file when LOG_FILE is set.
    The handlers are attached to the root logger so module loggers share them.
    """
    # Remove default Flask handlers to avoid duplicate logs
    app.logger.handlers.clear()

    formatter = logging.Formatter(
        fmt='%(asctime)s %(name)-20s %(levelname)-8s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    log_level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        if getattr(handler, '_intake_handler', False):
            root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler._intake_handler = True
    root_logger.addHandler(stream_handler)

    log_file = app.config.get('LOG_FILE')
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler._intake_handler = True
        root_logger.addHandler(file_handler)

    # Suppress verbose third-party logs in production
    if not app.debug:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)


def configure_services(app: Flask) -> None:
    """Attach the intake collaborators to the application"""
    app.intake_validator = IntakeValidator(
        allowed_types=app.config['ALLOWED_ATTACHMENT_TYPES'],
        max_attachment_bytes=app.config['MAX_ATTACHMENT_BYTES'],
    )
    app.notification_composer = NotificationComposer(
        position=app.config['JOB_POSITION'],
        source_label=app.config['INTAKE_SOURCE_LABEL'],
    )
    app.mail_dispatcher = MailDispatcher(
        SMTPSettings.from_config(app.config),
        sender=app.config['MAIL_FROM'],
        recipient=app.config['MAIL_RECIPIENT'],
    )
    app.bot_verifier = RecaptchaVerifier(
        secret_key=app.config['RECAPTCHA_SECRET_KEY'],
        verify_url=app.config['RECAPTCHA_VERIFY_URL'],
        score_threshold=app.config['RECAPTCHA_SCORE_THRESHOLD'],
        timeout=app.config['RECAPTCHA_TIMEOUT'],
    )

    if not app.bot_verifier.enabled:
        app.logger.info("RECAPTCHA_SECRET_KEY not set, bot verification disabled")


def configure_security(app: Flask) -> None:
    limiter.init_app(app)

    CORS(app,
         resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}},
         allow_headers=['Content-Type'])

    app.after_request(security_headers)

    app.logger.info(
        f"Rate limiting {'enabled' if app.config['RATELIMIT_ENABLED'] else 'disabled'}: "
        f"{app.config['INTAKE_RATE_LIMIT']} per client"
    )


def configure_error_handlers(app: Flask) -> None:
    """
    Convert framework errors to the {"success": false, "message"} shape
    """
    @app.errorhandler(RateLimitExceeded)
    def rate_limit_exceeded(error):
        app.logger.warning(f"Rate limit exceeded for {request.remote_addr} on {request.path}")
        return intake_response(False, RATE_LIMIT_MESSAGE, 429)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'message': 'The requested resource was not found'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'success': False,
            'message': 'Invalid request method'
        }), 405

    @app.errorhandler(413)
    def request_too_large(error):
        app.logger.warning(f"Oversized request from {request.remote_addr}: {request.content_length} bytes")
        return intake_response(False, 'File too large. Maximum 10MB allowed', 413)

    @app.errorhandler(Exception)
    def handle_exception(e):
        """Handle unexpected exceptions"""
        if isinstance(e, HTTPException):
            if request.blueprint == intake_bp.name:
                return intake_response(False, e.description, e.code)
            return jsonify({'success': False, 'message': e.description}), e.code

        app.logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'message': 'An unexpected error occurred. Please try again.'
        }), 500


def configure_health_checks(app: Flask) -> None:
    @app.route('/health')
    def health_check():
        """Basic health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'version': app.config.get('VERSION', '1.0.0')
        })


def create_app(config_name: Optional[str] = None) -> Flask:
    """
    Flask application factory

    Args:
        config_name: Configuration environment ('development', 'testing', 'production')

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    config_name = config_name or os.environ.get('FLASK_ENV', 'production')
    app.config.from_object(CONFIGS.get(config_name, CONFIGS['production']))

    setup_logging(app)
    app.logger.info(f"Starting intake service in {config_name} mode")

    configure_services(app)
    configure_security(app)

    app.register_blueprint(intake_bp)

    configure_error_handlers(app)
    configure_health_checks(app)

    return app


if __name__ == '__main__':
    # Development server
    app = create_app('development')
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=True)
