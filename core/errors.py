# core/errors.py
"""
Rejection taxonomy for intake submissions

Every error carries the user-facing message returned to the caller and the
HTTP status code used when status codes are enabled.
"""


class IntakeError(Exception):
    """Base exception for a rejected intake request"""

    status_code = 400
    default_message = 'Unable to process your request. Please try again.'

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(IntakeError):
    """Submitted form data failed validation"""
    pass


class MissingFieldError(ValidationError):
    default_message = 'Please fill all required fields'

    def __init__(self, fields=None, message: str = None):
        self.fields = list(fields or [])
        super().__init__(message)


class InvalidEmailError(ValidationError):
    default_message = 'Invalid email address'


class InvalidInsuranceTypeError(ValidationError):
    default_message = 'Please select a valid insurance type'


class AttachmentError(ValidationError):
    """Missing or unacceptable file upload"""
    pass


class MissingAttachmentError(AttachmentError):
    default_message = 'Please upload your CV'


class InvalidAttachmentTypeError(AttachmentError):
    default_message = 'Invalid file type. Only PDF, JPG, PNG allowed'


class AttachmentTooLargeError(AttachmentError):
    default_message = 'File too large. Maximum 10MB allowed'


class BotCheckFailedError(IntakeError):
    status_code = 403
    default_message = 'Bot verification failed. Please try again.'


class MailTransportError(IntakeError):
    """SMTP delivery failed; the detail is logged, never shown to the caller"""

    status_code = 502
    default_message = 'Failed to send your request. Please try again.'

    def __init__(self, detail: str, message: str = None):
        self.detail = detail
        super().__init__(message)


class TemplateRenderingError(IntakeError):
    """Notification could not be rendered; the detail is logged only"""

    status_code = 500
    default_message = 'Unable to process your request. Please try again.'

    def __init__(self, detail: str, message: str = None):
        self.detail = detail
        super().__init__(message)
