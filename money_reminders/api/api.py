from fastapi import APIRouter

from money_reminders.api.endpoints import reminders
from money_reminders.schemas.routes import REMINDERS_PATH

api_router = APIRouter()

api_router.include_router(reminders.router, prefix=REMINDERS_PATH, tags=["reminders"])
