# api/intake.py
"""
Intake API: job applications and insurance inquiries

Both endpoints answer with {"success": bool, "message": str}. Requests are
rate limited per client address across both endpoints, gated by the bot
verifier when one is configured, validated, then relayed to the operator
mailbox.
"""

import logging
import os
from typing import Optional

from flask import Blueprint, request, jsonify, current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from core.errors import IntakeError, MailTransportError
from core.models import Attachment
from middleware.security import require_bot_check

intake_bp = Blueprint('intake', __name__)
logger = logging.getLogger(__name__)

# Storage, strategy and enablement come from the RATELIMIT_* app config
limiter = Limiter(key_func=get_remote_address)

intake_limit = limiter.shared_limit(
    lambda: current_app.config['INTAKE_RATE_LIMIT'],
    scope='intake',
)

APPLY_SUCCESS_MESSAGE = 'Application submitted successfully! We will contact you soon.'
APPLY_FAILURE_MESSAGE = 'Failed to send application. Please try again.'
INQUIRY_SUCCESS_MESSAGE = 'Inquiry submitted successfully! Our team will contact you within 24 hours.'
INQUIRY_FAILURE_MESSAGE = 'Failed to send inquiry. Please try again.'


def intake_response(success: bool, message: str, status_code: int = 200):
    """
    Uniform JSON response for intake endpoints

    Failures are sent with HTTP 200 unless INTAKE_HTTP_STATUS_CODES is on.
    """
    if not current_app.config.get('INTAKE_HTTP_STATUS_CODES'):
        status_code = 200
    return jsonify({'success': success, 'message': message}), status_code


def read_upload(field_name: str) -> Optional[Attachment]:
    """Load an uploaded file into memory, or None when nothing was sent"""
    storage = request.files.get(field_name)
    if storage is None or not storage.filename:
        return None

    filename = os.path.basename(storage.filename.replace('\\', '/'))
    return Attachment(
        filename=filename,
        content_type=storage.mimetype,
        data=storage.read(),
    )


@intake_bp.errorhandler(IntakeError)
def handle_intake_error(error: IntakeError):
    logger.warning(
        f"Rejected {request.endpoint} submission from {request.remote_addr}: "
        f"{type(error).__name__}: {error.message}"
    )
    return intake_response(False, error.message, error.status_code)


@intake_bp.route('/api/apply', methods=['POST'])
@intake_limit
@require_bot_check
def apply():
    """Job application with CV attachment"""
    application = current_app.intake_validator.validate_job_application(
        request.form, read_upload('cv')
    )
    notification = current_app.notification_composer.compose_job_application(application)

    try:
        current_app.mail_dispatcher.send(notification)
    except MailTransportError as e:
        return intake_response(False, APPLY_FAILURE_MESSAGE, e.status_code)

    logger.info(f"Job application relayed for {application.email} ({application.cv.size} byte CV)")
    return intake_response(True, APPLY_SUCCESS_MESSAGE)


@intake_bp.route('/api/insurance', methods=['POST'])
@intake_limit
@require_bot_check
def insurance():
    """Insurance inquiry"""
    inquiry = current_app.intake_validator.validate_insurance_inquiry(request.form)
    notification = current_app.notification_composer.compose_insurance_inquiry(inquiry)

    try:
        current_app.mail_dispatcher.send(notification)
    except MailTransportError as e:
        return intake_response(False, INQUIRY_FAILURE_MESSAGE, e.status_code)

    logger.info(f"Insurance inquiry relayed for {inquiry.email} ({inquiry.insurance_type.value})")
    return intake_response(True, INQUIRY_SUCCESS_MESSAGE)
