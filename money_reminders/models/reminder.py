"""
Reminder model - one row per amount owed by a named person
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Index, text

from money_reminders.db.base import Base


class Reminder(Base):
    """A payment reminder: who owes how much, by when, and whether it has been settled"""
    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    person_name = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)  # Whole currency units
    due_date = Column(DateTime(timezone=True), nullable=False)
    is_paid = Column(Boolean, nullable=False, default=False, server_default=text("false"))

    __table_args__ = (
        Index("ix_reminders_due_date", "due_date"),
    )

    def __repr__(self) -> str:
        return f"<Reminder id={self.id} person_name={self.person_name!r} amount={self.amount} is_paid={self.is_paid}>"
