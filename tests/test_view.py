from datetime import datetime, timedelta, timezone
from urllib.parse import unquote

from money_reminders.client.i18n import translate
from money_reminders.client.view import (
    display_reminders,
    format_due_date,
    format_inr,
    group_indian,
    is_overdue,
    pending_count,
    total_pending,
    whatsapp_message,
    whatsapp_url,
)
from money_reminders.schemas.reminder import ReminderRead

BASE = datetime(2026, 3, 1, tzinfo=timezone.utc)


def reminder(id, name="Rahul Sharma", phone="9876543210", amount=500, days=0, paid=False):
    return ReminderRead(id=id, person_name=name, phone_number=phone, amount=amount,
                        due_date=BASE + timedelta(days=days), is_paid=paid)


def test_unpaid_first_then_ascending_due_date():
    items = [
        reminder(1, days=5, paid=True),
        reminder(2, days=9),
        reminder(3, days=1, paid=True),
        reminder(4, days=2),
        reminder(5, days=-3),
    ]
    ordered = display_reminders(items)
    assert [r.id for r in ordered] == [5, 4, 2, 3, 1]
    flags = [r.is_paid for r in ordered]
    assert flags == sorted(flags)


def test_search_matches_name_or_phone():
    items = [reminder(1, name="Amit Patel", phone="9123456789"), reminder(2, name="Sneha Gupta", phone="9988776655")]
    assert [r.id for r in display_reminders(items, "amit")] == [1]
    assert [r.id for r in display_reminders(items, "99887")] == [2]
    assert display_reminders(items, "nobody") == []
    assert display_reminders(None) == []


def test_display_does_not_mutate_input():
    items = [reminder(1, days=3), reminder(2, days=1)]
    display_reminders(items)
    assert [r.id for r in items] == [1, 2]


def test_stats_count_only_unpaid():
    items = [reminder(1, amount=500), reminder(2, amount=1200), reminder(3, amount=250, paid=True)]
    assert total_pending(items) == 1700
    assert pending_count(items) == 2


def test_overdue_only_when_unpaid_and_past():
    now = BASE + timedelta(days=1)
    assert is_overdue(reminder(1, days=0), now)
    assert not is_overdue(reminder(2, days=0, paid=True), now)
    assert not is_overdue(reminder(3, days=2), now)


def test_indian_grouping():
    assert group_indian(500) == "500"
    assert group_indian(1000) == "1,000"
    assert group_indian(123456) == "1,23,456"
    assert group_indian(10000000) == "1,00,00,000"
    assert format_inr(1700) == "₹1,700"


def test_due_date_formats():
    due = datetime(2026, 3, 5, 6, 0, tzinfo=timezone.utc)
    assert format_due_date(due, tz_name="UTC") == "5 Mar, 2026"
    assert format_due_date(due, "%d %b %Y", tz_name="UTC") == "05 Mar 2026"


def test_whatsapp_url_uses_digits_and_encoded_template():
    r = ReminderRead(id=1, person_name="Rahul Sharma", phone_number="+91 98765-43210", amount=500,
                     due_date=datetime(2026, 3, 5, 6, 0, tzinfo=timezone.utc), is_paid=False)
    url = whatsapp_url(r, "en", tz_name="UTC")
    prefix = "https://wa.me/919876543210?text="
    assert url.startswith(prefix)
    text = url[len(prefix):]
    assert " " not in text and "," not in text
    assert unquote(text) == "Hi Rahul Sharma, friendly reminder for payment of ₹500 due on 05 Mar 2026."


def test_whatsapp_message_in_hindi():
    r = reminder(1, name="Amit", amount=1200)
    message = whatsapp_message(r, "hi", tz_name="UTC")
    assert message == "नमस्ते Amit, ₹1200 का भुगतान 01 Mar 2026 तक बाकी है।"


def test_translate_fallbacks():
    assert translate("status.paid", "hi") == "भुगतान किया"
    assert translate("status.paid", "fr") == "Paid"
    assert translate("no.such.key") == "no.such.key"
