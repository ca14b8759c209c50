"""CSES document models - the contract between the reader and the writer.

Defines the typed structure of a CSES document: the subjects taught and the
weekly schedules that reference them by name. Every model converts to and
from the plain dict/list tree that the YAML codec produces, with ``from_dict``
applying the field defaults and rejecting shapes it cannot map.

Absent optional fields are ``None`` in memory and omitted on output, so an
empty string survives a round trip as an empty string.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import CSESFormatError

DEFAULT_VERSION = 1
TOP_LEVEL_KEYS = ("version", "subjects", "schedules")


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------

def _as_mapping(value: Any, where: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise CSESFormatError(
            f"{where}: expected a mapping, got {type(value).__name__}"
        )
    return value


def _as_items(value: Any, where: str) -> Sequence:
    """Return a sequence of child nodes; a missing or null node is empty."""
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise CSESFormatError(
            f"{where}: expected a sequence, got {type(value).__name__}"
        )
    return value


def _require(d: Mapping, key: str, where: str) -> Any:
    if key not in d:
        raise CSESFormatError(f"{where}: missing required key '{key}'")
    return d[key]


# ---------------------------------------------------------------------------
# Subject
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Subject:
    """A course offering, optionally with an abbreviation, teacher and room."""
    name: str
    simplified_name: str | None = None
    teacher: str | None = None
    room: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"name": self.name}
        if self.simplified_name is not None:
            d["simplified_name"] = self.simplified_name
        if self.teacher is not None:
            d["teacher"] = self.teacher
        if self.room is not None:
            d["room"] = self.room
        return d

    @classmethod
    def from_dict(cls, d: Any, where: str = "subject") -> "Subject":
        """Build a Subject; only ``name`` is required.

        A subject without ``name`` raises CSESFormatError rather than loading
        as a nameless entry, so a file can pass the key sniff and still fail
        here.
        """
        d = _as_mapping(d, where)
        return cls(
            name=_require(d, "name", where),
            simplified_name=d.get("simplified_name"),
            teacher=d.get("teacher"),
            room=d.get("room"),
        )


# ---------------------------------------------------------------------------
# ClassEntry - one time slot within a schedule
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassEntry:
    """A single lesson: which subject, from when until when.

    ``subject`` refers to a ``Subject.name`` by convention only; times are
    kept verbatim and never parsed.
    """
    subject: str
    start_time: str
    end_time: str

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }

    @classmethod
    def from_dict(cls, d: Any, where: str = "class") -> "ClassEntry":
        """Build a ClassEntry; all three keys are required."""
        d = _as_mapping(d, where)
        return cls(
            subject=_require(d, "subject", where),
            start_time=_require(d, "start_time", where),
            end_time=_require(d, "end_time", where),
        )


# ---------------------------------------------------------------------------
# Schedule - a weekly recurrence with its ordered lessons
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Schedule:
    """Lessons held on one day of the week, for all, odd or even weeks."""
    name: str
    enable_day: str                      # "mon" .. "sun" by convention
    weeks: str                           # "all", "odd" or "even" by convention
    classes: tuple[ClassEntry, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "enable_day": self.enable_day,
            "weeks": self.weeks,
            "classes": [c.to_dict() for c in self.classes],
        }

    @classmethod
    def from_dict(cls, d: Any, where: str = "schedule") -> "Schedule":
        """Build a Schedule; ``name``, ``enable_day`` and ``weeks`` are required.

        Missing required keys raise CSESFormatError naming the location
        instead of loading as empty values.
        """
        d = _as_mapping(d, where)
        classes = _as_items(d.get("classes"), f"{where}.classes")
        return cls(
            name=_require(d, "name", where),
            enable_day=_require(d, "enable_day", where),
            weeks=_require(d, "weeks", where),
            classes=tuple(
                ClassEntry.from_dict(c, f"{where}.classes[{i}]")
                for i, c in enumerate(classes)
            ),
        )


# ---------------------------------------------------------------------------
# Document - top-level container
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Document:
    """A complete CSES document.

    ``version`` is carried through untouched; nothing in this package
    interprets it.
    """
    version: int = DEFAULT_VERSION
    subjects: tuple[Subject, ...] = ()
    schedules: tuple[Schedule, ...] = ()

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "subjects": [s.to_dict() for s in self.subjects],
            "schedules": [s.to_dict() for s in self.schedules],
        }

    @classmethod
    def from_dict(cls, d: Any) -> "Document":
        """Map a decoded YAML tree onto a Document.

        ``None`` (an empty YAML stream) yields an empty document. Any other
        value must be a mapping.
        """
        if d is None:
            return cls()
        d = _as_mapping(d, "document")
        version = d.get("version")
        subjects = _as_items(d.get("subjects"), "subjects")
        schedules = _as_items(d.get("schedules"), "schedules")
        return cls(
            version=DEFAULT_VERSION if version is None else version,
            subjects=tuple(
                Subject.from_dict(s, f"subjects[{i}]")
                for i, s in enumerate(subjects)
            ),
            schedules=tuple(
                Schedule.from_dict(s, f"schedules[{i}]")
                for i, s in enumerate(schedules)
            ),
        )
