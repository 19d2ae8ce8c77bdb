from typing import Dict, Literal

Language = Literal["en", "hi"]

DEFAULT_LANGUAGE: Language = "en"
SUPPORTED_LANGUAGES = ("en", "hi")

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "app.title": {"en": "Money Reminders", "hi": "पैसे के रिमाइंडर"},
    "stats.total_pending": {"en": "Total Pending", "hi": "कुल बकाया"},
    "btn.add_reminder": {"en": "Add Reminder", "hi": "रिमाइंडर जोड़ें"},
    "btn.edit": {"en": "Edit", "hi": "संपादित करें"},
    "btn.delete": {"en": "Delete", "hi": "हटाएं"},
    "btn.save": {"en": "Save Reminder", "hi": "रिमाइंडर सहेजें"},
    "btn.cancel": {"en": "Cancel", "hi": "रद्द करें"},
    "label.name": {"en": "Person Name", "hi": "व्यक्ति का नाम"},
    "label.phone": {"en": "Phone Number", "hi": "फ़ोन नंबर"},
    "label.amount": {"en": "Amount", "hi": "रकम"},
    "label.due_date": {"en": "Due Date", "hi": "नियत तारीख"},
    "status.paid": {"en": "Paid", "hi": "भुगतान किया"},
    "status.unpaid": {"en": "Unpaid", "hi": "बकाया"},
    "msg.whatsapp_template": {
        "en": "Hi {name}, friendly reminder for payment of {amount} due on {date}.",
        "hi": "नमस्ते {name}, {amount} का भुगतान {date} तक बाकी है।",
    },
    "empty.title": {"en": "No reminders yet", "hi": "अभी कोई रिमाइंडर नहीं"},
    "empty.subtitle": {
        "en": "Add your first payment reminder to get started",
        "hi": "शुरू करने के लिए अपना पहला भुगतान रिमाइंडर जोड़ें",
    },
}


def translate(key: str, language: str = DEFAULT_LANGUAGE, **params) -> str:
    """Look up ``key`` and substitute ``{param}`` placeholders.

    Unknown keys come back unchanged; unsupported languages fall back to English.
    """
    if language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE
    text = TRANSLATIONS.get(key, {}).get(language) or key
    for name, value in params.items():
        text = text.replace("{" + name + "}", str(value))
    return text
