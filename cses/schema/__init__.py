"""CSES schema package - typed models and the YAML codec.

- models.py: Frozen dataclasses (Document, Subject, Schedule, ClassEntry)
- loader.py: YAML decoding/encoding and Document load/save
"""

from .loader import (
    CSESDumper,
    CSESLoader,
    dump_yaml,
    has_cses_keys,
    load_document,
    read_yaml,
    save_document,
    write_yaml,
)
from .models import (
    DEFAULT_VERSION,
    TOP_LEVEL_KEYS,
    ClassEntry,
    Document,
    Schedule,
    Subject,
)

__all__ = [
    # Models
    "ClassEntry",
    "Document",
    "Schedule",
    "Subject",
    "DEFAULT_VERSION",
    "TOP_LEVEL_KEYS",
    # Loader
    "CSESDumper",
    "CSESLoader",
    "dump_yaml",
    "has_cses_keys",
    "load_document",
    "read_yaml",
    "save_document",
    "write_yaml",
]
