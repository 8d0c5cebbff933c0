# core/models.py
"""
Request-scoped intake records. Nothing here is persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class InsuranceType(Enum):
    """Insurance categories offered on the landing page"""
    CORPORATE = "Corporate"
    SME = "SME"
    PERSONAL = "Personal"


@dataclass
class Attachment:
    """Uploaded file held in memory"""
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class JobApplication:
    full_name: str
    email: str
    phone: str
    education: str
    experience: str
    cv: Attachment
    motivation: Optional[str] = None


@dataclass
class InsuranceInquiry:
    full_name: str
    email: str
    phone: str
    insurance_type: InsuranceType
    corporate_plan: Optional[str] = None
    sme_plan: Optional[str] = None
    personal_plan: Optional[str] = None
    age_category: Optional[str] = None
    number_of_people: Optional[str] = None
    motivation: Optional[str] = None

    @property
    def selected_plan(self) -> str:
        """
        Plan chosen for the inquiry's category

        Personal plans carry the age category as a suffix, e.g. "Gold - Age: 26-35".
        """
        if self.insurance_type is InsuranceType.CORPORATE:
            return self.corporate_plan or ''
        if self.insurance_type is InsuranceType.SME:
            return self.sme_plan or ''
        if self.insurance_type is InsuranceType.PERSONAL and self.personal_plan:
            if self.age_category:
                return f"{self.personal_plan} - Age: {self.age_category}"
            return self.personal_plan
        return ''


@dataclass
class ComposedNotification:
    """Rendered operator notification, ready for the mail dispatcher"""
    subject: str
    html: str
    reply_to: str
    attachments: List[Attachment] = field(default_factory=list)
