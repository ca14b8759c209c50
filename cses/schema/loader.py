"""Document loader - YAML serialization and deserialization for CSES files.

Reading decodes a file into a generic tree first (``read_yaml``) and only then
maps it onto the typed models, so the sniffing check and the full load share
one decoder. Writing flattens the model to plain values and dumps it without
anchors or line wrapping.
"""

import datetime
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..errors import CSESFormatError, CSESNotFoundError, CSESWriteError
from .models import TOP_LEVEL_KEYS, Document

_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"

# PyYAML's YAML 1.1 resolvers minus the base-60 forms, so "10:00" is a string.
_INT_PATTERN = re.compile(r"""^(?:[-+]?0b[0-1_]+
    |[-+]?0[0-7_]+
    |[-+]?(?:0|[1-9][0-9_]*)
    |[-+]?0x[0-9a-fA-F_]+)$""", re.X)
_FLOAT_PATTERN = re.compile(r"""^(?:[-+]?(?:[0-9][0-9_]*)\.[0-9_]*(?:[eE][-+][0-9]+)?
    |\.[0-9_]+(?:[eE][-+][0-9]+)?
    |[-+]?\.(?:inf|Inf|INF)
    |\.(?:nan|NaN|NAN))$""", re.X)

_NOT_FOUND_ERRORS = (
    FileNotFoundError,
    NotADirectoryError,
    IsADirectoryError,
    PermissionError,
)

_SCALAR_TYPES = (str, bool, int, float, bytes, datetime.date, datetime.datetime)
_SKIP = object()


class CSESLoader(yaml.SafeLoader):
    """Safe loader that keeps clock times such as ``08:00`` as strings."""


CSESLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers
            if tag not in (_INT_TAG, _FLOAT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CSESLoader.add_implicit_resolver(_INT_TAG, _INT_PATTERN, list("-+0123456789"))
CSESLoader.add_implicit_resolver(_FLOAT_TAG, _FLOAT_PATTERN, list("-+0123456789."))


class CSESDumper(yaml.SafeDumper):
    """Safe dumper that writes every value out in full, never as an alias."""

    def ignore_aliases(self, data):
        return True


# ---------------------------------------------------------------------------
# Generic tree I/O
# ---------------------------------------------------------------------------

def read_yaml(path: str | Path) -> Any:
    """Read a file and decode it as a single YAML document.

    Returns:
        The decoded tree, or None for an empty document.

    Raises:
        CSESNotFoundError: If the path does not resolve to a readable file.
        CSESFormatError: If the content is not UTF-8 text or not valid YAML.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except _NOT_FOUND_ERRORS as exc:
        raise CSESNotFoundError(path) from exc
    except UnicodeDecodeError as exc:
        raise CSESFormatError(f"not UTF-8 text: {exc}", path) from exc

    try:
        return yaml.load(text, Loader=CSESLoader)
    except yaml.YAMLError as exc:
        raise CSESFormatError(f"YAML Error: {exc}", path) from exc


def dump_yaml(data: Any) -> str:
    """Encode a plain tree as YAML text, dropping values YAML cannot hold."""
    data = _plain(data)
    if data is _SKIP:
        data = None
    return yaml.dump(data, Dumper=CSESDumper, default_flow_style=False,
                     sort_keys=False, allow_unicode=True, width=float("inf"))


def write_yaml(data: Any, path: str | Path) -> None:
    """Encode a plain tree as YAML and write it to ``path``, overwriting.

    Raises:
        CSESWriteError: If the file cannot be written.
    """
    path = Path(path)
    text = dump_yaml(data)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise CSESWriteError(path, exc.strerror or str(exc)) from exc


def _plain(value: Any) -> Any:
    """Reduce ``value`` to types the safe dumper can represent.

    Unrepresentable leaves come back as ``_SKIP`` and are dropped from their
    parent mapping or sequence.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, Mapping):
        out = {}
        for key, item in value.items():
            if key is not None and not isinstance(key, _SCALAR_TYPES):
                continue
            item = _plain(item)
            if item is _SKIP:
                continue
            out[key] = item
        return out
    if isinstance(value, (list, tuple)):
        return [item for item in map(_plain, value) if item is not _SKIP]
    if isinstance(value, (set, frozenset)):
        return {item for item in value
                if item is None or isinstance(item, _SCALAR_TYPES)}
    return _SKIP


# ---------------------------------------------------------------------------
# Document I/O
# ---------------------------------------------------------------------------

def load_document(path: str | Path) -> Document:
    """Deserialize a Document from a CSES YAML file."""
    data = read_yaml(path)
    try:
        return Document.from_dict(data)
    except CSESFormatError as exc:
        raise CSESFormatError(exc.message, path) from exc


def save_document(document: Document, path: str | Path) -> None:
    """Serialize a Document to a CSES YAML file."""
    write_yaml(document.to_dict(), path)


def has_cses_keys(data: Any) -> bool:
    """True if a decoded tree is a mapping carrying every top-level CSES key."""
    return isinstance(data, Mapping) and all(k in data for k in TOP_LEVEL_KEYS)
