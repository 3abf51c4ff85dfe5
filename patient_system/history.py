import logging
import operator
from typing import Callable, Iterator, List, Optional

from .models import Record

logger = logging.getLogger(__name__)

SEPARATOR = " <-> "
EMPTY_VIEW = "(Empty)"


# Node of the history chain; links are arena indices, not object references
class HistoryNode:
    def __init__(self, record: Record):
        self.record = record
        self.next: Optional[int] = None
        self.previous: Optional[int] = None


class RecordView:
    """Restartable, lazy walk over the history in one direction."""

    def __init__(self, walk: Callable[[], Iterator[Record]], title: str):
        self._walk = walk
        self.title = title

    def __iter__(self) -> Iterator[Record]:
        return self._walk()

    def __str__(self):
        joined = SEPARATOR.join(str(r) for r in self._walk())
        return joined or EMPTY_VIEW

    def render(self) -> str:
        return f"Patient History List: ({self.title}):\n{self}\n"


# ---------- Navigator ----------
class HistoryNavigator:
    """
    Doubly linked list of visit records with a movable cursor.

    Nodes live in an arena (list) and are addressed by index; head, tail and the
    cursor are indices into it. Nodes are only ever inserted, so an index stays
    valid for the lifetime of the navigator.

    insert at head/tail O(1), interior insert O(position), cursor moves O(1).
    Cursor moves clamp at the ends instead of failing; use is_at_oldest() /
    is_at_newest() to find out whether a step actually happened.
    """

    def __init__(self):
        self._nodes: List[HistoryNode] = []
        self.head: Optional[int] = None
        self.tail: Optional[int] = None
        self.current: Optional[int] = None

    def size(self) -> int:
        return len(self._nodes)

    def __len__(self):
        return len(self._nodes)

    def is_empty(self) -> bool:
        return self.head is None

    def insert_at(self, record: Record, position: int) -> None:
        """Insert record at 0-based position, clamped to [0, size]."""
        if record is None:
            raise ValueError("record must not be None")
        # non-integer positions fail here, before the arena is touched
        position = operator.index(position)

        idx = len(self._nodes)
        node = HistoryNode(record)
        self._nodes.append(node)

        if self.head is None:
            self.head = self.tail = self.current = idx
            logger.debug("history: first record %s", record)
            return

        if position <= 0:
            node.next = self.head
            self._nodes[self.head].previous = idx
            self.head = idx
            logger.debug("history: inserted at head (requested %d)", position)
            return

        if position >= idx:
            node.previous = self.tail
            self._nodes[self.tail].next = idx
            self.tail = idx
            logger.debug("history: inserted at tail (requested %d)", position)
            return

        # walk to the node just before the target position
        before = self.head
        for _ in range(position - 1):
            before = self._nodes[before].next
        after = self._nodes[before].next

        node.previous = before
        node.next = after
        self._nodes[before].next = idx
        self._nodes[after].previous = idx
        logger.debug("history: inserted at position %d", position)

    # Traversal
    def iter_oldest_first(self) -> Iterator[Record]:
        cur = self.head
        while cur is not None:
            node = self._nodes[cur]
            yield node.record
            cur = node.next

    def iter_newest_first(self) -> Iterator[Record]:
        cur = self.tail
        while cur is not None:
            node = self._nodes[cur]
            yield node.record
            cur = node.previous

    def to_oldest_first_newest_last(self) -> RecordView:
        return RecordView(self.iter_oldest_first, "Oldest -> Newest")

    def to_newest_first_oldest_last(self) -> RecordView:
        return RecordView(self.iter_newest_first, "Newest -> Oldest")

    # Cursor
    def jump_to_newest(self) -> Optional[Record]:
        if self.tail is None:
            return None
        self.current = self.tail
        return self._nodes[self.current].record

    def jump_to_oldest(self) -> Optional[Record]:
        if self.head is None:
            return None
        self.current = self.head
        return self._nodes[self.current].record

    def step_next(self) -> Optional[Record]:
        if self.current is None:
            return None
        nxt = self._nodes[self.current].next
        if nxt is not None:
            self.current = nxt
        return self._nodes[self.current].record

    def step_previous(self) -> Optional[Record]:
        if self.current is None:
            return None
        prev = self._nodes[self.current].previous
        if prev is not None:
            self.current = prev
        return self._nodes[self.current].record

    def is_at_newest(self) -> bool:
        return self.current is not None and self.current == self.tail

    def is_at_oldest(self) -> bool:
        return self.current is not None and self.current == self.head

    def current_record(self) -> Optional[Record]:
        if self.current is None:
            return None
        return self._nodes[self.current].record
