from datetime import date
from pathlib import Path
from typing import Optional

from .config import get_images_dir, get_overrides_path, get_manifest_path
from .entry import Entry
from .overrides import Overrides, load_overrides
from .collectors import COLLECTORS
from .assembler import Manifest, assemble, collect_parts, summarize, write_manifest, dataset_version


def build_manifest(
    images_dir: Optional[Path] = None,
    overrides: Optional[Overrides] = None,
    on: Optional[date] = None,
) -> Manifest:
    """
    Scan the image tree and build the full manifest.

    Overrides are loaded from the default document when not given.
    Nothing is written; see ``write_manifest``.
    """
    if overrides is None:
        overrides = load_overrides()
    parts = collect_parts(images_dir or get_images_dir(), overrides)
    return assemble(parts, on)
