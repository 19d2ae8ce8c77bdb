from .reminder import Reminder  # noqa: F401
