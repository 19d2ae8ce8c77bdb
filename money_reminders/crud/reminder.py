import logging
from typing import List, Optional
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from money_reminders.models.reminder import Reminder
from money_reminders.schemas.reminder import ReminderCreate, ReminderUpdate

logger = logging.getLogger(__name__)


class CRUDReminder:
    def list(self, db: Session) -> List[Reminder]:
        """All reminders, latest due date first."""
        stmt = select(Reminder).order_by(Reminder.due_date.desc(), Reminder.id.desc())
        return list(db.execute(stmt).scalars())

    def get(self, db: Session, id: int) -> Optional[Reminder]:
        return db.get(Reminder, id)

    def create(self, db: Session, *, obj_in: ReminderCreate) -> Reminder:
        db_obj = Reminder(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"Created reminder {db_obj.id} for {db_obj.person_name}")
        return db_obj

    def update(self, db: Session, id: int, *, obj_in: ReminderUpdate) -> Optional[Reminder]:
        """Apply only the supplied fields. Returns None when the id does not exist."""
        db_obj = db.get(Reminder, id)
        if db_obj is None:
            return None
        changes = obj_in.changes()
        for field, value in changes.items():
            setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"Updated reminder {id}: {sorted(changes)}")
        return db_obj

    def delete(self, db: Session, id: int) -> None:
        """Remove the row if present; deleting an unknown id is a no-op."""
        result = db.execute(delete(Reminder).where(Reminder.id == id))
        db.commit()
        if result.rowcount:
            logger.info(f"Deleted reminder {id}")
        else:
            logger.info(f"Delete requested for unknown reminder {id}")


reminder = CRUDReminder()
