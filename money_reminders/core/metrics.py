from prometheus_client import Counter


reminders_created_total = Counter(
    "reminders_created_total",
    "Total reminders created via API",
)

reminders_updated_total = Counter(
    "reminders_updated_total",
    "Total reminders updated via API",
)

reminders_deleted_total = Counter(
    "reminders_deleted_total",
    "Total reminder delete requests handled",
)

validation_failures_total = Counter(
    "reminder_validation_failures_total",
    "Total requests rejected by payload validation",
)
