import logging
from typing import Any, Dict, List, Optional
import requests

from money_reminders.core.config import settings
from money_reminders.schemas.reminder import ReminderCreate, ReminderRead, ReminderUpdate
from money_reminders.schemas.routes import (
    CREATE_REMINDER,
    DELETE_REMINDER,
    GET_REMINDER,
    LIST_REMINDERS,
    UPDATE_REMINDER,
    Route,
    build_url,
)

logger = logging.getLogger(__name__)


class ReminderApiError(Exception):
    """A non-success response from the reminders API."""

    def __init__(self, message: str, status_code: Optional[int] = None, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.field = field


def _error_body(response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class ReminderClient:
    """Thin HTTP client for the reminders API.

    ``session`` may be a ``requests.Session`` or anything with the same
    ``get/post/patch/delete`` call shape (FastAPI's ``TestClient`` works).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_prefix: Optional[str] = None,
        session=None,
        timeout: Optional[int] = None,
    ):
        self.base_url = (base_url or settings.REMINDER_SERVICE_URL).rstrip("/")
        self.api_prefix = settings.API_PREFIX if api_prefix is None else api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout or settings.CLIENT_TIMEOUT_SECONDS

    def _url(self, route: Route, **params) -> str:
        return f"{self.base_url}{self.api_prefix}{build_url(route.path, **params)}"

    def _send(self, route: Route, json: Optional[Dict[str, Any]] = None, **params):
        method = getattr(self.session, route.method.lower())
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if json is not None:
            kwargs["json"] = json
        return method(self._url(route, **params), **kwargs)

    def list_reminders(self) -> List[ReminderRead]:
        r = self._send(LIST_REMINDERS)
        if r.status_code != 200:
            raise ReminderApiError("Failed to fetch reminders", r.status_code)
        return [ReminderRead.model_validate(item) for item in r.json()]

    def get_reminder(self, reminder_id: int) -> ReminderRead:
        r = self._send(GET_REMINDER, id=reminder_id)
        if r.status_code != 200:
            body = _error_body(r)
            raise ReminderApiError(body.get("message", "Failed to fetch reminder"), r.status_code)
        return ReminderRead.model_validate(r.json())

    def create_reminder(self, data: ReminderCreate) -> ReminderRead:
        r = self._send(CREATE_REMINDER, json=data.model_dump(mode="json", by_alias=True))
        if r.status_code == 400:
            body = _error_body(r)
            raise ReminderApiError(body.get("message", "Failed to create reminder"), 400, body.get("field"))
        if r.status_code != 201:
            raise ReminderApiError("Failed to create reminder", r.status_code)
        return ReminderRead.model_validate(r.json())

    def update_reminder(self, reminder_id: int, updates: ReminderUpdate) -> ReminderRead:
        payload = updates.model_dump(mode="json", by_alias=True, exclude_unset=True)
        r = self._send(UPDATE_REMINDER, json=payload, id=reminder_id)
        if r.status_code != 200:
            body = _error_body(r)
            raise ReminderApiError("Failed to update reminder", r.status_code, body.get("field"))
        return ReminderRead.model_validate(r.json())

    def delete_reminder(self, reminder_id: int) -> None:
        r = self._send(DELETE_REMINDER, id=reminder_id)
        if r.status_code >= 400:
            raise ReminderApiError("Failed to delete reminder", r.status_code)
