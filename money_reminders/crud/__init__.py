from .reminder import reminder  # noqa: F401
