import logging
from collections import deque
from typing import Deque, Iterator, Optional

from .models import Patient, PatientIdGenerator

logger = logging.getLogger(__name__)


class WaitingQueue:
    """FIFO waiting room with emergency insertion at an arbitrary position."""
    # enqueue/dequeue O(1), insert_at O(position)

    def __init__(self, id_generator: Optional[PatientIdGenerator] = None):
        self.ids = id_generator or PatientIdGenerator()
        self._patients: Deque[Patient] = deque()

    def new_patient(self, name: str, reason_for_visit: str) -> Patient:
        return Patient(id=self.ids.next_id(), name=name, reason_for_visit=reason_for_visit)

    def enqueue(self, patient: Patient) -> Patient:
        if patient is None:
            raise ValueError("patient must not be None")
        self._patients.append(patient)
        logger.debug("queue: added %s (size=%d)", patient.id, len(self._patients))
        return patient

    def dequeue_next(self) -> Optional[Patient]:
        if not self._patients:
            return None
        patient = self._patients.popleft()
        logger.debug("queue: serving %s (size=%d)", patient.id, len(self._patients))
        return patient

    def insert_at(self, patient: Patient, position: int) -> bool:
        if patient is None:
            raise ValueError("patient must not be None")
        if position < 0 or position > len(self._patients):
            logger.debug("queue: rejected position %d (size=%d)", position, len(self._patients))
            return False
        self._patients.insert(position, patient)
        logger.debug("queue: emergency insert %s at %d", patient.id, position)
        return True

    def peek(self) -> Optional[Patient]:
        if not self._patients:
            return None
        return self._patients[0]

    def size(self) -> int:
        return len(self._patients)

    def is_empty(self) -> bool:
        return len(self._patients) == 0

    def __len__(self):
        return len(self._patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def render_all(self) -> str:
        if not self._patients:
            return ""
        lines = ["Patient Waiting Queue:"]
        lines.extend(str(p) for p in self._patients)
        return "\n".join(lines) + "\n"
