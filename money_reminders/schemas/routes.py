"""
Route table shared by the API routers and the HTTP client.

Paths are relative to the API prefix (``settings.API_PREFIX``).
"""
import re
from typing import NamedTuple


class Route(NamedTuple):
    method: str
    path: str


REMINDERS_PATH = "/reminders"

LIST_REMINDERS = Route("GET", REMINDERS_PATH)
GET_REMINDER = Route("GET", REMINDERS_PATH + "/{id}")
CREATE_REMINDER = Route("POST", REMINDERS_PATH)
UPDATE_REMINDER = Route("PATCH", REMINDERS_PATH + "/{id}")
DELETE_REMINDER = Route("DELETE", REMINDERS_PATH + "/{id}")

_PLACEHOLDER = re.compile(r"\{(\w+)\}|:(\w+)")


def build_url(path: str, **params) -> str:
    """Fill ``{name}`` or ``:name`` placeholders; unknown placeholders are left in place."""
    def _sub(match: re.Match) -> str:
        key = match.group(1) or match.group(2)
        if key in params:
            return str(params[key])
        return match.group(0)

    return _PLACEHOLDER.sub(_sub, path)
