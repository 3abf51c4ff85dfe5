from .history import HistoryNavigator
from .models import Record

SEED_RECORDS = [
    ("2026-01-01", "Flu", "Rest, hydration"),
    ("2026-01-03", "Sprain", "Ice, wrap, elevate"),
    ("2026-01-06", "Migraine", "Pain relief + rest"),
    ("2026-01-10", "Allergy", "Antihistamine"),
    ("2026-01-14", "Sore throat", "Supportive care"),
    ("2026-01-18", "Back pain", "Stretching plan"),
    ("2026-01-22", "Checkup", "Vitals normal"),
    ("2026-01-26", "Stomach bug", "Fluids + rest"),
    ("2026-02-02", "Skin rash", "Topical cream"),
    ("2026-02-10", "Follow-up", "Improving"),
]


def seed_ten_records(history: HistoryNavigator) -> int:
    """Append the demo visits, oldest first. Returns how many were added."""
    for visit_date, diagnosis, notes in SEED_RECORDS:
        history.insert_at(Record(visit_date, diagnosis, notes), history.size())
    return len(SEED_RECORDS)
