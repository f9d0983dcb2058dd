"""
Note model and the in-memory NoteStore.
Notes are addressed by their position in the store.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List

from src.utils.enums import StoreEvent
from src.utils.logger import Logger

logger = Logger()

StoreListener = Callable[[StoreEvent, int], None]


class NoteStoreError(Exception):
    """Base exception for note store errors."""
    pass


class NoteIndexError(NoteStoreError, IndexError):
    """Raised when an index is not within [0, length)."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"Note index {index!r} out of range for store of length {length}"
        )


@dataclass
class Note:
    """A single note: a title and a description."""
    title: str
    description: str

    def __str__(self):
        return f"Note(title='{self.title}')"


class NoteStore:
    """Ordered, mutable collection of notes.

    Insertion order is display order and duplicates are allowed. A note's
    identity is its index, so removing a note shifts every later note one
    position earlier and invalidates indices held elsewhere.
    """

    def __init__(self):
        self._notes: List[Note] = []
        self._listeners: List[StoreListener] = []

    def _check_index(self, index) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise NoteIndexError(index, len(self._notes))
        if not 0 <= index < len(self._notes):
            raise NoteIndexError(index, len(self._notes))

    def append(self, note: Note) -> None:
        """Append a note to the end of the store."""
        self._notes.append(note)
        self._notify(StoreEvent.APPENDED, len(self._notes) - 1)

    def replace_at(self, index: int, note: Note) -> None:
        """Overwrite the note at index in place."""
        self._check_index(index)
        self._notes[index] = note
        self._notify(StoreEvent.REPLACED, index)

    def remove_at(self, index: int) -> Note:
        """Remove and return the note at index."""
        self._check_index(index)
        removed = self._notes.pop(index)
        self._notify(StoreEvent.REMOVED, index)
        return removed

    def get(self, index: int) -> Note:
        self._check_index(index)
        return self._notes[index]

    def length(self) -> int:
        return len(self._notes)

    def notes(self) -> List[Note]:
        """Snapshot of all notes in display order."""
        return list(self._notes)

    def subscribe(self, callback: StoreListener) -> None:
        """Register a callback invoked after every successful mutation."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: StoreListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, event: StoreEvent, index: int) -> None:
        for callback in list(self._listeners):
            try:
                callback(event, index)
            except Exception as e:
                logger.error(f"Error in note store listener for {event.value}: {e}")

    def __len__(self):
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def __str__(self):
        return f"NoteStore({len(self._notes)} notes)"
