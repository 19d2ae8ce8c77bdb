"""
Display-side projections of the reminder list.

Nothing here is persisted: the filtered/sorted list, the totals and the
WhatsApp link are recomputed from whatever the read hook last returned.
"""
import re
from datetime import datetime
from typing import Iterable, List, Optional
from urllib.parse import quote

from money_reminders.client.i18n import DEFAULT_LANGUAGE, translate
from money_reminders.schemas.reminder import ReminderRead
from money_reminders.utils.timezone import now_utc, to_local, to_utc_aware

MESSAGE_DATE_FORMAT = "%d %b %Y"  # 05 Mar 2026

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def matches_search(reminder: ReminderRead, search: str) -> bool:
    """Name matches case-insensitively; phone matches on the raw substring."""
    if not search:
        return True
    return search.lower() in reminder.person_name.lower() or search in reminder.phone_number


def sort_key(reminder: ReminderRead):
    # Unpaid first, then the most urgent due date
    return (reminder.is_paid, to_utc_aware(reminder.due_date))


def display_reminders(reminders: Optional[Iterable[ReminderRead]], search: str = "") -> List[ReminderRead]:
    return sorted((r for r in reminders or () if matches_search(r, search)), key=sort_key)


def total_pending(reminders: Iterable[ReminderRead]) -> int:
    return sum(r.amount for r in reminders if not r.is_paid)


def pending_count(reminders: Iterable[ReminderRead]) -> int:
    return sum(1 for r in reminders if not r.is_paid)


def is_overdue(reminder: ReminderRead, now: Optional[datetime] = None) -> bool:
    now = to_utc_aware(now) if now else now_utc()
    return not reminder.is_paid and to_utc_aware(reminder.due_date) < now


def group_indian(number: int) -> str:
    """Indian digit grouping: last three digits, then pairs (1234567 -> 12,34,567)."""
    sign = "-" if number < 0 else ""
    digits = str(abs(number))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_inr(amount: int) -> str:
    return "₹" + group_indian(amount)


def format_due_date(due_date: datetime, fmt: Optional[str] = None, tz_name: Optional[str] = None) -> str:
    """Card style "5 Mar, 2026" unless a strftime format is given."""
    local = to_local(due_date, tz_name)
    if fmt is None:
        return f"{local.day} {local:%b, %Y}"
    return local.strftime(fmt)


def whatsapp_message(reminder: ReminderRead, language: str = DEFAULT_LANGUAGE, tz_name: Optional[str] = None) -> str:
    return translate(
        "msg.whatsapp_template",
        language,
        name=reminder.person_name,
        amount=f"₹{reminder.amount}",
        date=format_due_date(reminder.due_date, MESSAGE_DATE_FORMAT, tz_name),
    )


def whatsapp_url(reminder: ReminderRead, language: str = DEFAULT_LANGUAGE, tz_name: Optional[str] = None) -> str:
    phone = re.sub(r"\D", "", reminder.phone_number, flags=re.ASCII)
    text = quote(whatsapp_message(reminder, language, tz_name), safe=_URI_COMPONENT_SAFE)
    return f"https://wa.me/{phone}?text={text}"
