"""CSES writer - builds a document in memory and saves it as YAML."""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .schema.loader import write_yaml
from .schema.models import DEFAULT_VERSION, ClassEntry, Document, Schedule, Subject


class CSESGenerator:
    """Accumulates subjects and schedules for a CSES document.

    Entries are kept in insertion order. ``generate_cses_data`` and
    ``save_to_file`` may be called any number of times; neither changes
    the generator.
    """

    def __init__(self, version: int = DEFAULT_VERSION):
        self._version = version
        self._subjects: list[Subject] = []
        self._schedules: list[Schedule] = []

    @property
    def version(self) -> int:
        return self._version

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return tuple(self._subjects)

    @property
    def schedules(self) -> tuple[Schedule, ...]:
        return tuple(self._schedules)

    def add_subject(
        self,
        name: str,
        simplified_name: str | None = None,
        teacher: str | None = None,
        room: str | None = None,
    ) -> Subject:
        """Append a subject. Names are not checked for emptiness or duplicates."""
        subject = Subject(name=name, simplified_name=simplified_name,
                          teacher=teacher, room=room)
        self._subjects.append(subject)
        return subject

    def add_schedule(
        self,
        name: str,
        enable_day: str,
        weeks: str,
        classes: Iterable[Mapping[str, Any] | ClassEntry],
    ) -> Schedule:
        """Append a schedule built from ``classes``.

        Each class may be a ClassEntry or a mapping with ``subject``,
        ``start_time`` and ``end_time``; any other keys are dropped.

        Raises:
            CSESFormatError: If a class mapping lacks one of the three keys.
        """
        entries = []
        for i, cls in enumerate(classes):
            if not isinstance(cls, ClassEntry):
                cls = ClassEntry.from_dict(cls, f"{name}.classes[{i}]")
            entries.append(cls)
        schedule = Schedule(name=name, enable_day=enable_day, weeks=weeks,
                            classes=tuple(entries))
        self._schedules.append(schedule)
        return schedule

    def to_document(self) -> Document:
        """Snapshot the current state as an immutable Document."""
        return Document(
            version=self._version,
            subjects=tuple(self._subjects),
            schedules=tuple(self._schedules),
        )

    def generate_cses_data(self) -> dict:
        """Return the document as a fresh dict of plain lists and dicts."""
        return self.to_document().to_dict()

    def save_to_file(self, file_path: str | Path) -> None:
        """Write the document to ``file_path`` as YAML, replacing any file there.

        Raises:
            CSESWriteError: If the file cannot be written. Parent directories
                are not created.
        """
        write_yaml(self.generate_cses_data(), file_path)
