"""
Client-side data hooks over the reminders API.

The list of reminders is cached by a ``Query``; every successful mutation
invalidates it so the next read refetches from the server (invalidate-and-refetch).
Mutation results are never merged into the cached list, and failed mutations
leave the cache untouched and raise a user-facing notification instead.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from money_reminders.client.http import ReminderApiError, ReminderClient
from money_reminders.schemas.reminder import ReminderCreate, ReminderRead, ReminderUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors a hook turns into a notification; anything else is a bug and propagates
HOOK_ERRORS = (ReminderApiError, requests.RequestException)


@dataclass
class Notification:
    title: str
    description: str
    variant: str = "default"  # "default" | "destructive"


Notifier = Callable[[Notification], None]


def log_notification(notification: Notification) -> None:
    level = logging.WARNING if notification.variant == "destructive" else logging.INFO
    logger.log(level, f"{notification.title}: {notification.description}")


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ReminderApiError):
        return exc.message
    return str(exc) or exc.__class__.__name__


def _invalid_input(exc: ValidationError, model: type[BaseModel]) -> ReminderApiError:
    """Report the first error with the field spelled as the API spells it (camelCase)."""
    err = exc.errors()[0]
    parts = [str(part) for part in err.get("loc", ())]
    if parts and parts[0] in model.model_fields:
        parts[0] = model.model_fields[parts[0]].alias or parts[0]
    field = ".".join(parts)
    return ReminderApiError(err.get("msg", "Invalid value"), field=field or None)


class Query(Generic[T]):
    """Cached result of a read; refetched on the next ``read()`` once invalidated."""

    def __init__(self, fetcher: Callable[[], T]):
        self._fetcher = fetcher
        self.data: Optional[T] = None
        self.error: Optional[Exception] = None
        self.is_loading = False
        self.is_stale = True
        self.fetch_count = 0

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def invalidate(self) -> None:
        self.is_stale = True

    def fetch(self) -> "Query[T]":
        self.is_loading = True
        self.fetch_count += 1
        try:
            self.data = self._fetcher()
            self.error = None
        except HOOK_ERRORS as exc:
            logger.warning(f"Query failed: {_error_message(exc)}")
            self.error = exc
        finally:
            self.is_loading = False
            self.is_stale = False
        return self

    def read(self) -> "Query[T]":
        if self.is_stale:
            self.fetch()
        return self


class Mutation(Generic[T]):
    """One write operation with success/error callbacks; no retry, no optimistic update."""

    def __init__(
        self,
        fn: Callable[..., T],
        on_success: Optional[Callable[[T], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self._fn = fn
        self._on_success = on_success
        self._on_error = on_error
        self.status = "idle"
        self.data: Optional[T] = None
        self.error: Optional[Exception] = None

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    def mutate(self, *args: Any, **kwargs: Any) -> Optional[T]:
        self.status = "pending"
        self.error = None
        try:
            result = self._fn(*args, **kwargs)
        except HOOK_ERRORS as exc:
            self.status = "error"
            self.error = exc
            if self._on_error:
                self._on_error(exc)
            return None
        self.status = "success"
        self.data = result
        if self._on_success:
            self._on_success(result)
        return result


class ReminderHooks:
    """Reminder list query plus create/update/delete mutations sharing one cache entry."""

    def __init__(self, client: Optional[ReminderClient] = None, notify: Optional[Notifier] = None):
        self.client = client or ReminderClient()
        self.notify = notify or log_notification
        self.reminders_query: Query[List[ReminderRead]] = Query(self.client.list_reminders)

    # -- read ---------------------------------------------------------------

    def use_reminders(self) -> Query[List[ReminderRead]]:
        return self.reminders_query.read()

    # -- mutations ----------------------------------------------------------

    def _notify_error(self, exc: Exception) -> None:
        self.notify(Notification("Error", _error_message(exc), variant="destructive"))

    def _invalidate(self, toast: Optional[Notification] = None) -> Callable[[Any], None]:
        def on_success(_result: Any) -> None:
            self.reminders_query.invalidate()
            if toast:
                self.notify(toast)
        return on_success

    def use_create_reminder(self) -> Mutation[ReminderRead]:
        return Mutation(
            self.client.create_reminder,
            on_success=self._invalidate(Notification("Success", "Reminder added successfully")),
            on_error=self._notify_error,
        )

    def use_update_reminder(self) -> Mutation[ReminderRead]:
        return Mutation(
            self.client.update_reminder,
            on_success=self._invalidate(),
            on_error=self._notify_error,
        )

    def use_delete_reminder(self) -> Mutation[None]:
        return Mutation(
            self.client.delete_reminder,
            on_success=self._invalidate(Notification("Deleted", "Reminder removed")),
            on_error=self._notify_error,
        )

    # -- conveniences used by the views -------------------------------------

    def create(self, **fields: Any) -> Optional[ReminderRead]:
        try:
            data = ReminderCreate(**fields)
        except ValidationError as exc:
            self._notify_error(_invalid_input(exc, ReminderCreate))
            return None
        return self.use_create_reminder().mutate(data)

    def update(self, reminder_id: int, **updates: Any) -> Optional[ReminderRead]:
        try:
            data = ReminderUpdate(**updates)
        except ValidationError as exc:
            self._notify_error(_invalid_input(exc, ReminderUpdate))
            return None
        return self.use_update_reminder().mutate(reminder_id, data)

    def toggle_paid(self, reminder: ReminderRead) -> Optional[ReminderRead]:
        return self.update(reminder.id, is_paid=not reminder.is_paid)

    def delete(self, reminder_id: int) -> bool:
        mutation = self.use_delete_reminder()
        mutation.mutate(reminder_id)
        return mutation.status == "success"

