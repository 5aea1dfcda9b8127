import importlib.util
import pytest
from pathlib import Path

from bxmanifest.overrides import Overrides

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"

# Relative to images/, one image per line item in the catalog
SAMPLE_IMAGES = [
    "blade/bx/dran_sword.webp",
    "blade/bx/hells_scythe.webp",
    "blade/bx/DRAN_DAGGER.WEBP",
    "blade/ux/wizard_rod.webp",
    "blade/cx/pegasus_blast.webp",
    "blade/collabs/optimus_prime.webp",
    "blade/xover/dragoon.webp",
    "blade/chip/dran.webp",
    "blade/assist/slash.webp",
    "rachet/standard/3-80.webp",
    "rachet/standard/1-60.webp",
    "rachet/integrated/turbo.webp",
    "bit/standard/gear_ball.webp",
    "bit/standard/wedge.webp",
]


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"RIFF\x00\x00\x00\x00WEBP")
    return path


@pytest.fixture
def project_root(tmp_path) -> Path:
    """A project checkout with a populated images/ tree."""
    images = tmp_path / "images"
    for rel in SAMPLE_IMAGES:
        touch(images / rel)
    # Noise the collectors must skip
    touch(images / "blade" / "bx" / "notes.txt")
    (images / "blade" / "bx" / "archive.webp").mkdir()
    touch(images / "blade" / "bx" / "nested" / "deep.webp")
    (images / "blade" / "bx" / "phantom.webp").symlink_to(images / "blade" / "bx" / "dran_sword.webp")
    return tmp_path


@pytest.fixture
def images_dir(project_root) -> Path:
    return project_root / "images"


@pytest.fixture
def no_overrides() -> Overrides:
    return Overrides.empty()


@pytest.fixture
def build_script():
    """The build_manifest.py script loaded as a module."""
    spec = importlib.util.spec_from_file_location("build_manifest", SCRIPTS_DIR / "build_manifest.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
