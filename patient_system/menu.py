from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional, Sequence

from .config import Settings, get_settings
from .history import HistoryNavigator
from .models import PatientIdGenerator
from .seed import seed_ten_records
from .waiting_room import WaitingQueue

logger = logging.getLogger(__name__)

NO_RECORDS = "\nNo records in history."


class ConsoleMenu:
    """Text menu over the waiting room and the visit history."""

    def __init__(
        self,
        waiting_queue: WaitingQueue,
        history: HistoryNavigator,
        input_fn: Optional[Callable[[str], str]] = None,
        print_fn: Optional[Callable[[str], None]] = None,
        seed_on_empty: bool = True,
    ):
        self.waiting_queue = waiting_queue
        self.history = history
        self._input = input_fn or input
        self._print = print_fn or print
        self.seed_on_empty = seed_on_empty

    # ---------- input helpers ----------
    def read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._print("Please enter a valid number.")

    def read_line(self, prompt: str) -> str:
        return self._input(prompt).strip()

    # ---------- menus ----------
    def start(self) -> None:
        while True:
            self._print("\n *** Welcome to Patient Management System ***")
            self._print("1. Waiting Room")
            self._print("2. Patient History")
            self._print("3. Exit")

            choice = self.read_int("Choose an option: ")
            if choice == 1:
                self.waiting_room_menu()
            elif choice == 2:
                self.history_menu()
            elif choice == 3:
                self._print("Goodbye!")
                return
            else:
                self._print("Wrong option. Try again.")

    def waiting_room_menu(self) -> None:
        actions = {
            1: self.add_patient,
            2: self.serve_next_patient,
            3: self.emergency_insert,
            4: self.print_queue,
        }
        while True:
            self._print("\n*** Waiting Room Menu ***")
            self._print("1. Add patient")
            self._print("2. Serve next patient")
            self._print("3. Emergency add patient at position")
            self._print("4. Print queue")
            self._print("5. Back")

            choice = self.read_int("Choose an option: ")
            if choice == 5:
                return
            action = actions.get(choice)
            if action is None:
                self._print("Invalid option. Try again.")
            else:
                action()

    def add_patient(self) -> None:
        name = self.read_line("Name: ")
        reason = self.read_line("Reason for visit: ")
        patient = self.waiting_queue.enqueue(self.waiting_queue.new_patient(name, reason))
        self._print(f"\nPatient added to the queue.\n{patient}")

    def serve_next_patient(self) -> None:
        served = self.waiting_queue.dequeue_next()
        if served is None:
            self._print("\nNo patients in the queue to serve.")
        else:
            self._print(f"\nServing patient: {served}")

    def emergency_insert(self) -> None:
        name = self.read_line("Name: ")
        reason = self.read_line("Reason for visit: ")
        patient = self.waiting_queue.new_patient(name, reason)

        while True:
            size = self.waiting_queue.size()
            position = self.read_int(f"Insert patient from position 0 to {size}: ")
            if self.waiting_queue.insert_at(patient, position):
                break
            self._print(f"\nInvalid position. Insert patient from position 0 to {size}")
        self._print(f"\nEmergency patient inserted at position {position}.\n{patient}")

    def print_queue(self) -> None:
        state = self.waiting_queue.render_all()
        if not state:
            self._print("\nThe waiting queue is currently empty.")
        else:
            self._print("\n" + state.rstrip("\n"))

    def history_menu(self) -> None:
        if self.history.is_empty() and self.seed_on_empty:
            seed_ten_records(self.history)
            logger.info("history was empty, seeded demo records")

        actions = {
            1: self.show_newest,
            2: self.show_oldest,
            3: self.show_next,
            4: self.show_previous,
            5: self.show_current,
            6: self.show_all,
            7: self.show_all_reversed,
        }
        while True:
            self._print("\n*** Patient History Menu ***")
            self._print("1. Show newest record")
            self._print("2. Show oldest record")
            self._print("3. Show next record")
            self._print("4. Show previous record")
            self._print("5. Show current record")
            self._print("6. Show all records")
            self._print("7. Show all records in reverse")
            self._print("8. Back")

            choice = self.read_int("Choose an option: ")
            if choice == 8:
                return
            action = actions.get(choice)
            if action is None:
                self._print("\nInvalid option. Choose between 1 and 8.")
            else:
                action()

    def show_newest(self) -> None:
        record = self.history.jump_to_newest()
        self._print(NO_RECORDS if record is None else f"\nNewest record:\n{record}")

    def show_oldest(self) -> None:
        record = self.history.jump_to_oldest()
        self._print(NO_RECORDS if record is None else f"\nOldest record:\n{record}")

    def show_next(self) -> None:
        # stepping clamps at the tail, so check the boundary before moving
        at_end = self.history.is_at_newest()
        record = self.history.step_next()
        if record is None:
            self._print(NO_RECORDS)
        elif at_end:
            self._print(f"\nNo next record. This is the newest record:\n{record}")
        else:
            self._print(f"\nNext record:\n{record}")

    def show_previous(self) -> None:
        at_start = self.history.is_at_oldest()
        record = self.history.step_previous()
        if record is None:
            self._print(NO_RECORDS)
        elif at_start:
            self._print(f"\nNo previous record. This is the oldest record:\n{record}")
        else:
            self._print(f"\nPrevious record:\n{record}")

    def show_current(self) -> None:
        record = self.history.current_record()
        self._print("\nNo current record." if record is None else f"\nCurrent record:\n{record}")

    def show_all(self) -> None:
        if self.history.is_empty():
            self._print(NO_RECORDS)
        else:
            self._print("\n" + self.history.to_oldest_first_newest_last().render().rstrip("\n"))

    def show_all_reversed(self) -> None:
        if self.history.is_empty():
            self._print(NO_RECORDS)
        else:
            self._print("\n" + self.history.to_newest_first_oldest_last().render().rstrip("\n"))


# ---------- entry point ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="patient-system", description="Patient waiting room and visit history console")
    p.add_argument("--log-level", default=None, help="Override PATIENT_SYSTEM_LOG_LEVEL (e.g. DEBUG)")
    p.add_argument("--no-seed", action="store_true", help="Start with an empty visit history")
    return p


def build_components(settings: Settings) -> tuple[WaitingQueue, HistoryNavigator]:
    ids = PatientIdGenerator(prefix=settings.patient_id_prefix, start=settings.patient_id_start)
    queue = WaitingQueue(id_generator=ids)
    history = HistoryNavigator()
    if settings.seed_history:
        seed_ten_records(history)
    return queue, history


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if args.log_level:
        settings.log_level = args.log_level
    if args.no_seed:
        settings.seed_history = False

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info("starting (seed_history=%s)", settings.seed_history)

    queue, history = build_components(settings)
    menu = ConsoleMenu(queue, history, seed_on_empty=settings.seed_history)
    try:
        menu.start()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")


if __name__ == "__main__":
    main()
