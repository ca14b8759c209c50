"""Read and write CSES (Course Schedule Exchange Schema) YAML documents.

- CSESParser: load a file and query its subjects and schedules
- CSESGenerator: build a document in memory and save it
"""

from .errors import CSESError, CSESFormatError, CSESNotFoundError, CSESWriteError
from .generator import CSESGenerator
from .parser import CSESParser
from .schema.models import ClassEntry, Document, Schedule, Subject

__version__ = "0.1.0"

__all__ = [
    "CSESGenerator",
    "CSESParser",
    # Models
    "ClassEntry",
    "Document",
    "Schedule",
    "Subject",
    # Errors
    "CSESError",
    "CSESFormatError",
    "CSESNotFoundError",
    "CSESWriteError",
]
