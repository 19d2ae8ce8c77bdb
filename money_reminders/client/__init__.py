from .http import ReminderApiError, ReminderClient  # noqa: F401
from .hooks import Mutation, Notification, Query, ReminderHooks  # noqa: F401
