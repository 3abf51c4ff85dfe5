from .history import HistoryNavigator, RecordView
from .models import Patient, PatientIdGenerator, Record
from .waiting_room import WaitingQueue

__all__ = [
    "HistoryNavigator",
    "Patient",
    "PatientIdGenerator",
    "Record",
    "RecordView",
    "WaitingQueue",
]
