from pydantic import BaseModel, field_validator
from typing import Literal, Optional
from datetime import datetime

Severity = Literal["mild", "moderate", "severe"]


def _required_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Allergy name is required")
    return value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class AllergyCreate(BaseModel):
    name: str
    severity: Severity = "mild"
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _required_name(value)

    @field_validator("notes")
    @classmethod
    def empty_notes_to_none(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class AllergyUpdate(BaseModel):
    name: Optional[str] = None
    severity: Optional[Severity] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _required_name(value)

    @field_validator("notes")
    @classmethod
    def empty_notes_to_none(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class AllergyResponse(BaseModel):
    id: str
    user_id: str
    name: str
    severity: Severity
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
