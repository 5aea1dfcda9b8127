"""
Assemble collected entries into the manifest document and persist it.
"""

import json
import os
import tempfile
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from bxmanifest.collectors import COLLECTORS
from bxmanifest.entry import Entry
from bxmanifest.overrides import Overrides

SCHEMA_VERSION = 1

# Manifest key -> dry-run summary key
SUMMARY_KEYS = {
    "blade": "blades",
    "rachet": "rachets",
    "bit": "bits",
    "chip": "chips",
    "assist": "assists",
}


@dataclass
class Manifest:
    version: str
    parts: Dict[str, List[Entry]] = field(default_factory=dict)
    schema: int = SCHEMA_VERSION

    def to_dict(self) -> dict:
        return {
            "schema": self.schema,
            "version": self.version,
            "parts": {k: [e.to_dict() for e in entries] for k, entries in self.parts.items()},
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def total_entries(parts: Dict[str, List[Entry]]) -> int:
    return sum(len(entries) for entries in parts.values())


def dataset_version(parts: Dict[str, List[Entry]], on: Optional[date] = None) -> str:
    """
    "<YYYY-MM-DD>+<entry count>", e.g. "2025-03-01+412".

    Only a change hint: two runs on the same day with the same number of
    entries get the same version even if names changed.
    """
    on = on or today_utc()
    return f"{on.isoformat()}+{total_entries(parts)}"


def collect_parts(images_dir: Path, overrides: Overrides) -> Dict[str, List[Entry]]:
    return {key: collect(images_dir, overrides) for key, collect in COLLECTORS.items()}


def assemble(parts: Dict[str, List[Entry]], on: Optional[date] = None) -> Manifest:
    ordered = {key: list(parts.get(key, [])) for key in COLLECTORS}
    return Manifest(version=dataset_version(ordered, on), parts=ordered)


def summarize(parts: Dict[str, List[Entry]]) -> dict:
    return {"summary": {SUMMARY_KEYS[key]: len(parts.get(key, [])) for key in COLLECTORS}}


def write_manifest(manifest: Manifest, output_path: Path) -> Path:
    """
    Write the manifest as indented JSON.

    The document is serialized before anything touches the disk and then
    swapped into place, so the destination either holds the previous file
    or the complete new one.
    """
    text = manifest.to_json()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=output_path.parent, prefix=".index-", suffix=".json.tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
            tmp_file.write(text)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, output_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return output_path
