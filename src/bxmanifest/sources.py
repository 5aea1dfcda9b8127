"""
Read-only ports onto the filesystem.

Both readers report what they found instead of raising: ``Found`` carries
the value, ``Absent`` carries the reason nothing could be read. Callers
decide where to fall back to an empty default.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, TypeVar, Union

from bxmanifest.config import IMAGE_EXTS

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class Absent:
    reason: str


Result = Union[Found[T], Absent]


def is_image(path: Path) -> bool:
    # Symlinks are skipped even when they point at an image
    return path.is_file() and not path.is_symlink() and path.suffix.lower() in IMAGE_EXTS


def scan_dir(directory: Path) -> Result[list[Path]]:
    """List image files directly inside ``directory``, sorted by name."""
    try:
        files = [p for p in directory.iterdir() if is_image(p)]
    except OSError as e:
        return Absent(f"{directory}: {e.strerror or e}")
    files.sort(key=lambda p: p.name)
    return Found(files)


def read_json_document(path: Path) -> Result[Any]:
    try:
        return Found(json.loads(path.read_text(encoding="utf-8")))
    except OSError as e:
        return Absent(f"{path}: {e.strerror or e}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return Absent(f"{path}: {e}")


def value_or(result: Result[T], default: T) -> T:
    if isinstance(result, Found):
        return result.value
    return default
