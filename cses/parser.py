"""CSES reader - loads a document once and answers queries over it.

The model is built in full at construction time and never changes
afterwards; every accessor hands out tuples of frozen dataclasses.
"""

from pathlib import Path

from .schema.loader import has_cses_keys, load_document, read_yaml
from .schema.models import ClassEntry, Document, Schedule, Subject


class CSESParser:
    """Read-only view over a CSES YAML file.

    Raises:
        CSESNotFoundError: If ``file_path`` cannot be opened.
        CSESFormatError: If the file is not valid YAML or not a CSES mapping.
    """

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)
        self._document = load_document(self.file_path)

    @property
    def document(self) -> Document:
        return self._document

    @property
    def version(self) -> int:
        return self._document.version

    def get_subjects(self) -> tuple[Subject, ...]:
        """Return all subjects in file order."""
        return self._document.subjects

    def get_schedules(self) -> tuple[Schedule, ...]:
        """Return all schedules in file order."""
        return self._document.schedules

    def get_schedule_by_day(self, day: str) -> tuple[ClassEntry, ...]:
        """Return the classes of the first schedule enabled on ``day``.

        ``day`` is compared exactly (``"mon"`` does not match ``"Mon"``).
        Later schedules for the same day, such as an even-week variant, are
        not consulted. An unknown day yields an empty tuple.
        """
        for schedule in self._document.schedules:
            if schedule.enable_day == day:
                return schedule.classes
        return ()

    @staticmethod
    def is_cses_file(file_path: str | Path) -> bool:
        """Guess whether ``file_path`` holds a CSES document.

        Only checks that the file decodes to a mapping with ``version``,
        ``subjects`` and ``schedules`` keys; their values are not inspected.
        Never raises.
        """
        try:
            data = read_yaml(file_path)
        except Exception:
            return False
        return has_cses_keys(data)

    def __repr__(self) -> str:
        return (f"CSESParser({str(self.file_path)!r}, version={self.version}, "
                f"subjects={len(self.get_subjects())}, "
                f"schedules={len(self.get_schedules())})")
