# drivers/records.py
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .staging import FileHandle


@dataclass(frozen=True)
class DriverRecord:
    """提交给 RecordSubmitter 的司机记录（表单清洗后的值 + 附件）"""
    first_name: str
    last_name: str
    email: str
    phone: str
    license_number: str
    license_state: str
    license_expiry: date
    cdl_class: object = None          # 多选模式为 list，单选模式为 str
    endorsements: object = None
    medical_card_number: str = ""
    medical_card_expiry: Optional[date] = None
    notes: str = ""
    attachments: tuple = field(default_factory=tuple)
    profile_photo: Optional[FileHandle] = None

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_cleaned_data(cls, cleaned, attachments=(), profile_photo=None):
        return cls(
            first_name=cleaned["first_name"],
            last_name=cleaned["last_name"],
            email=cleaned["email"],
            phone=cleaned["phone"],
            license_number=cleaned["license_number"],
            license_state=cleaned["license_state"],
            license_expiry=cleaned["license_expiry"],
            cdl_class=cleaned.get("cdl_class"),
            endorsements=cleaned.get("endorsements"),
            medical_card_number=cleaned.get("medical_card_number", ""),
            medical_card_expiry=cleaned.get("medical_card_expiry"),
            notes=cleaned.get("notes", ""),
            attachments=tuple(attachments),
            profile_photo=profile_photo,
        )
