from pathlib import Path
import os

# Default to the repository checkout if not specified
ROOT = Path(os.environ.get("BXMANIFEST_ROOT", Path(__file__).resolve().parents[2]))

IMAGE_EXTS = {".webp"}

def get_images_dir(root: Path = ROOT) -> Path:
    return root / "images"

def get_manifest_path(root: Path = ROOT) -> Path:
    return root / "manifest" / "index.json"

def get_overrides_path(root: Path = ROOT) -> Path:
    return root / "data" / "overrides" / "config.json"
