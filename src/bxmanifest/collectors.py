"""
One collector per part family. Each walks its own subdirectories of the
image root and turns every image file into an Entry.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from bxmanifest.entry import Entry
from bxmanifest.naming import (
    id_from_stem,
    short_for_assist,
    short_for_bit,
    short_for_blade,
    short_for_chip,
    short_for_rachet,
    title_from_stem,
)
from bxmanifest.overrides import Overrides
from bxmanifest.sources import scan_dir, value_or


@dataclass(frozen=True)
class BladeBucket:
    subdir: str
    id_suffix: str
    category: str
    default_config: str
    system: Optional[str]  # None: taken from xoverSystem, default BX


BLADE_BUCKETS = [
    BladeBucket("bx", "bx", "canon", "integrated", "BX"),
    BladeBucket("ux", "ux", "canon", "integrated", "UX"),
    BladeBucket("cx", "cx", "canon", "integrated", "CX"),
    BladeBucket("collabs", "collab", "collab", "integrated", "BX"),
    BladeBucket("xover", "xover", "xover", "standard", None),
]

RACHET_TYPES = ["standard", "integrated"]


def rel_from_images(path: Path, images_dir: Path) -> str:
    return path.relative_to(images_dir).as_posix()


def list_images(directory: Path) -> List[Path]:
    # Missing or unreadable directories contribute nothing
    return value_or(scan_dir(directory), [])


def collect_blades(images_dir: Path, overrides: Overrides) -> List[Entry]:
    out = []
    for bucket in BLADE_BUCKETS:
        for f in list_images(images_dir / "blade" / bucket.subdir):
            stem = f.stem
            name = title_from_stem(stem)
            system = bucket.system
            if system is None:
                system = overrides.xover_system.get(stem, "BX")
            out.append(Entry(
                id=f"{id_from_stem(stem)}-{bucket.id_suffix}",
                name=name,
                short=short_for_blade(name),
                system=system,
                config=overrides.blade_config.get(stem, bucket.default_config),
                category=bucket.category,
                path=rel_from_images(f, images_dir),
            ))
    return out


def collect_rachets(images_dir: Path, overrides: Overrides) -> List[Entry]:
    out = []
    for rachet_type in RACHET_TYPES:
        for f in list_images(images_dir / "rachet" / rachet_type):
            stem = f.stem
            name = title_from_stem(stem)  # "1-60" keeps its hyphen
            out.append(Entry(
                id=id_from_stem(stem),
                name=name,
                short=short_for_rachet(name),
                type=rachet_type,
                path=rel_from_images(f, images_dir),
            ))
    return out


def collect_bits(images_dir: Path, overrides: Overrides) -> List[Entry]:
    out = []
    for f in list_images(images_dir / "bit" / "standard"):
        stem = f.stem
        name = title_from_stem(stem)
        out.append(Entry(
            id=id_from_stem(stem),
            name=name,
            short=short_for_bit(name, overrides),
            path=rel_from_images(f, images_dir),
        ))
    return out


def collect_chips(images_dir: Path, overrides: Overrides) -> List[Entry]:
    out = []
    for f in list_images(images_dir / "blade" / "chip"):
        stem = f.stem
        out.append(Entry(
            id=f"{id_from_stem(stem)}-chip",
            name=f"{title_from_stem(stem)} Chip",
            short=short_for_chip(stem, overrides),
            path=rel_from_images(f, images_dir),
        ))
    return out


def collect_assists(images_dir: Path, overrides: Overrides) -> List[Entry]:
    out = []
    for f in list_images(images_dir / "blade" / "assist"):
        stem = f.stem
        out.append(Entry(
            id=f"{id_from_stem(stem)}-assist-blade",
            name=f"{title_from_stem(stem)} Assist Blade",
            short=short_for_assist(stem, overrides),
            path=rel_from_images(f, images_dir),
        ))
    return out


# Manifest key -> collector, in manifest order
COLLECTORS: Dict[str, Callable[[Path, Overrides], List[Entry]]] = {
    "blade": collect_blades,
    "rachet": collect_rachets,
    "bit": collect_bits,
    "chip": collect_chips,
    "assist": collect_assists,
}
