"""
Request/response contracts for reminders.

JSON uses camelCase (``personName``, ``dueDate``...), Python attributes stay snake_case.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from money_reminders.utils.timezone import to_utc_aware


REMINDER_FIELDS = ("person_name", "phone_number", "amount", "due_date", "is_paid")

# reminders.amount is a 32-bit INTEGER column
MAX_AMOUNT = 2_147_483_647


class ReminderBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class ReminderCreate(ReminderBase):
    """Schema for creating a reminder"""
    person_name: str = Field(..., min_length=1, strict=True)
    phone_number: str = Field(..., min_length=1, strict=True)
    amount: int = Field(..., ge=1, le=MAX_AMOUNT, strict=True)
    due_date: datetime
    is_paid: bool = Field(default=False, strict=True)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime) -> datetime:
        return to_utc_aware(v)


class ReminderUpdate(ReminderBase):
    """Schema for partially updating a reminder.

    Only keys present in the request are applied; use ``model_dump(exclude_unset=True)``
    to get them. A key sent with ``null`` is rejected rather than treated as absent.
    """
    person_name: Optional[str] = Field(default=None, min_length=1, strict=True)
    phone_number: Optional[str] = Field(default=None, min_length=1, strict=True)
    amount: Optional[int] = Field(default=None, ge=1, le=MAX_AMOUNT, strict=True)
    due_date: Optional[datetime] = None
    is_paid: Optional[bool] = Field(default=None, strict=True)

    @field_validator(*REMINDER_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc_aware(v)

    def changes(self) -> dict:
        """Attribute -> value for the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True)


class ReminderRead(BaseModel):
    """Schema for reading a reminder"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    person_name: str
    phone_number: str
    amount: int
    due_date: datetime
    is_paid: bool

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; stored values are always UTC
        return to_utc_aware(v)
