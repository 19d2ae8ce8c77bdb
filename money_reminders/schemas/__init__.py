from .reminder import ReminderCreate, ReminderUpdate, ReminderRead  # noqa: F401
from .error import ValidationErrorResponse, NotFoundResponse, InternalErrorResponse  # noqa: F401
