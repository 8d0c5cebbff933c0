# core/validators.py
"""
Form validation for job applications and insurance inquiries

Checks run in a single pass and the first failure is raised:
required fields, email format, insurance category, then the attachment.
"""

import logging
from typing import Iterable, Mapping, Optional, Sequence

from email_validator import validate_email, EmailNotValidError

from core.errors import (
    MissingFieldError,
    InvalidEmailError,
    InvalidInsuranceTypeError,
    MissingAttachmentError,
    InvalidAttachmentTypeError,
    AttachmentTooLargeError,
)
from core.models import Attachment, JobApplication, InsuranceInquiry, InsuranceType

logger = logging.getLogger(__name__)

JOB_APPLICATION_REQUIRED = ('fullName', 'email', 'phone', 'education', 'experience')
INSURANCE_INQUIRY_REQUIRED = ('fullName', 'email', 'phone', 'insuranceType')

DEFAULT_ALLOWED_TYPES = ('application/pdf', 'image/jpeg', 'image/jpg', 'image/png')
DEFAULT_MAX_ATTACHMENT_BYTES = 10 * 1024 * 1024


def clean_form(form: Mapping[str, str]) -> dict:
    """Strip surrounding whitespace from every string value"""
    return {key: (value.strip() if isinstance(value, str) else value)
            for key, value in form.items()}


class IntakeValidator:
    """Validates raw form mappings and builds the intake records"""

    def __init__(self,
                 allowed_types: Sequence[str] = DEFAULT_ALLOWED_TYPES,
                 max_attachment_bytes: int = DEFAULT_MAX_ATTACHMENT_BYTES):
        self.allowed_types = {t.lower() for t in allowed_types}
        self.max_attachment_bytes = max_attachment_bytes

    def check_required(self, data: Mapping[str, str], required: Iterable[str]) -> None:
        missing = [name for name in required if not data.get(name)]
        if missing:
            raise MissingFieldError(missing)

    def check_email(self, email: str) -> None:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            logger.debug(f"Rejected email address: {e}")
            raise InvalidEmailError() from e

    def check_attachment(self, attachment: Optional[Attachment]) -> None:
        if attachment is None or not attachment.filename or not attachment.data:
            raise MissingAttachmentError()

        content_type = (attachment.content_type or '').split(';')[0].strip().lower()
        if content_type not in self.allowed_types:
            raise InvalidAttachmentTypeError()

        if attachment.size > self.max_attachment_bytes:
            raise AttachmentTooLargeError()

    def validate_job_application(self, form: Mapping[str, str],
                                 cv: Optional[Attachment]) -> JobApplication:
        data = clean_form(form)
        self.check_required(data, JOB_APPLICATION_REQUIRED)
        self.check_email(data['email'])
        self.check_attachment(cv)

        return JobApplication(
            full_name=data['fullName'],
            email=data['email'],
            phone=data['phone'],
            education=data['education'],
            experience=data['experience'],
            motivation=data.get('motivation') or None,
            cv=cv,
        )

    def validate_insurance_inquiry(self, form: Mapping[str, str]) -> InsuranceInquiry:
        data = clean_form(form)
        self.check_required(data, INSURANCE_INQUIRY_REQUIRED)
        self.check_email(data['email'])

        try:
            insurance_type = InsuranceType(data['insuranceType'])
        except ValueError as e:
            raise InvalidInsuranceTypeError() from e

        return InsuranceInquiry(
            full_name=data['fullName'],
            email=data['email'],
            phone=data['phone'],
            insurance_type=insurance_type,
            corporate_plan=data.get('corporatePlan') or None,
            sme_plan=data.get('smePlan') or None,
            personal_plan=data.get('personalPlan') or None,
            age_category=data.get('ageCategory') or None,
            number_of_people=data.get('numberOfPeople') or None,
            motivation=data.get('motivation') or None,
        )
