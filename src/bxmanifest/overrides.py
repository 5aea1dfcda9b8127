"""
Manual exceptions to the filename rules.

The optional override document is a JSON object such as::

    {
        "xoverSystem": {"dragoon": "BX", "wizard": "UX"},
        "bladeConfig": {"hells_scythe": "integrated"},
        "assistShort": {"slash": "S"},
        "chipShort":   {"dran": "Dran"},
        "bitShort":    {"gear ball": "GB"}
    }

Each top-level key replaces the built-in (empty) mapping wholesale.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from bxmanifest.config import get_overrides_path
from bxmanifest.sources import Absent, Found, Result, read_json_document, value_or

# document key -> Overrides attribute
DOCUMENT_KEYS = {
    "xoverSystem": "xover_system",
    "bladeConfig": "blade_config",
    "assistShort": "assist_short",
    "chipShort": "chip_short",
    "bitShort": "bit_short",
}


def _frozen(mapping: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Overrides:
    """Read-only override tables, keyed by filename stem (or bit name)."""
    xover_system: Mapping[str, str] = field(default_factory=_frozen)
    blade_config: Mapping[str, str] = field(default_factory=_frozen)
    assist_short: Mapping[str, str] = field(default_factory=_frozen)
    chip_short: Mapping[str, str] = field(default_factory=_frozen)
    bit_short: Mapping[str, str] = field(default_factory=_frozen)

    @classmethod
    def empty(cls) -> "Overrides":
        return cls()

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Overrides":
        """Merge a validated override document over the empty defaults."""
        tables = {}
        for doc_key, attr in DOCUMENT_KEYS.items():
            if doc_key in document:
                tables[attr] = _frozen(document[doc_key])
        return cls(**tables)


def _is_string_table(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


def parse_overrides(document: Any) -> Result[Overrides]:
    if not isinstance(document, dict):
        return Absent(f"override document is {type(document).__name__}, expected object")
    for doc_key in DOCUMENT_KEYS:
        if doc_key in document and not _is_string_table(document[doc_key]):
            return Absent(f"override field '{doc_key}' is not a string mapping")
    return Found(Overrides.from_document(document))


def read_overrides(path: Optional[Path] = None) -> Result[Overrides]:
    """Read and validate the override document without falling back."""
    raw = read_json_document(path or get_overrides_path())
    if isinstance(raw, Absent):
        return raw
    return parse_overrides(raw.value)


def load_overrides(path: Optional[Path] = None) -> Overrides:
    """Load overrides, treating a missing or malformed document as 'no overrides'."""
    return value_or(read_overrides(path), Overrides.empty())
