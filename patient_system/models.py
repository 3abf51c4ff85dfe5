from dataclasses import dataclass
from datetime import date
from typing import Union
import itertools


# ---------- ADTs ----------
@dataclass(frozen=True)
class Record:
    """One patient visit. Position in the history is its only identity."""
    visit_date: Union[str, date]
    diagnosis: str
    treatment_notes: str

    def __str__(self):
        return (f"PatientRecord {{ visitDate={self.visit_date}, "
                f"diagnosis='{self.diagnosis}', treatmentNotes='{self.treatment_notes}'}}")


@dataclass(frozen=True)
class Patient:
    id: str
    name: str
    reason_for_visit: str

    def __str__(self):
        return f"Patient {{ id={self.id}, name='{self.name}', reasonForVisit={self.reason_for_visit}}}"


class PatientIdGenerator:
    """Hands out "P1", "P2", ... ; each instance keeps its own counter."""

    def __init__(self, prefix: str = "P", start: int = 1):
        if start < 0:
            raise ValueError("start must be >= 0")
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
