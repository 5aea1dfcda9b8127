#!/usr/bin/env python
"""
Scan the image tree and write the parts manifest.

Usage:
    python scripts/build_manifest.py            # writes manifest/index.json
    python scripts/build_manifest.py --dry-run  # prints per-category counts only

Overrides are read from data/overrides/config.json under the project root
($BXMANIFEST_ROOT, default: this checkout). A missing or malformed file is
ignored without any message.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bxmanifest import build_manifest, summarize, write_manifest
from bxmanifest.config import ROOT, get_images_dir, get_manifest_path, get_overrides_path
from bxmanifest.overrides import load_overrides


def run(dry_run: bool, root: Path = ROOT) -> None:
    overrides = load_overrides(get_overrides_path(root))
    manifest = build_manifest(get_images_dir(root), overrides)

    if dry_run:
        print(json.dumps(summarize(manifest.parts), indent=2))
        return

    output_path = write_manifest(manifest, get_manifest_path(root))
    print(f"Manifest written to {output_path.relative_to(root).as_posix()}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build the parts manifest from the image tree.")
    parser.add_argument("--dry-run", action="store_true", help="Print per-category counts without writing")
    args = parser.parse_args(argv)

    try:
        run(args.dry_run, ROOT)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
