"""Money Reminders: track who owes money, when it is due, and nudge them on WhatsApp."""
