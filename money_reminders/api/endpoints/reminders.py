from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from money_reminders import crud
from money_reminders.db.session import get_db
from money_reminders.core.metrics import reminders_created_total, reminders_updated_total, reminders_deleted_total
from money_reminders.schemas.reminder import ReminderCreate, ReminderRead, ReminderUpdate
from money_reminders.schemas.error import NotFoundResponse, ValidationErrorResponse


router = APIRouter()

_VALIDATION = {400: {"model": ValidationErrorResponse}}
_NOT_FOUND = {404: {"model": NotFoundResponse}}


@router.get("", response_model=List[ReminderRead])
def list_reminders_endpoint(db: Session = Depends(get_db)):
    return crud.reminder.list(db)


@router.post("", response_model=ReminderRead, status_code=201, responses=_VALIDATION)
def create_reminder_endpoint(payload: ReminderCreate, db: Session = Depends(get_db)):
    r = crud.reminder.create(db, obj_in=payload)
    reminders_created_total.inc()
    return r


@router.get("/{reminder_id}", response_model=ReminderRead, responses=_NOT_FOUND)
def get_reminder_endpoint(reminder_id: int, db: Session = Depends(get_db)):
    r = crud.reminder.get(db, reminder_id)
    if not r:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return r


@router.patch("/{reminder_id}", response_model=ReminderRead, responses={**_VALIDATION, **_NOT_FOUND})
def update_reminder_endpoint(reminder_id: int, payload: ReminderUpdate, db: Session = Depends(get_db)):
    """Merge the supplied fields into an existing reminder."""
    r = crud.reminder.update(db, reminder_id, obj_in=payload)
    if not r:
        raise HTTPException(status_code=404, detail="Reminder not found")
    reminders_updated_total.inc()
    return r


@router.delete("/{reminder_id}", status_code=204)
def delete_reminder_endpoint(reminder_id: int, db: Session = Depends(get_db)):
    """Delete a reminder by ID. Unknown ids also answer 204."""
    crud.reminder.delete(db, reminder_id)
    reminders_deleted_total.inc()
    return Response(status_code=204)
