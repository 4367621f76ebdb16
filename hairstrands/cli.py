"""Command that loads a hair file and reports the combined strand mesh."""

from __future__ import annotations

import argparse
import sys

from .hair_loader import HairDataError, HairLoader
from .mesh import build_strand_mesh

DEFAULT_DATA_PATH = "../data/strands00001.data"


def _fmt(v) -> str:
    return "(" + ", ".join(f"{c:g}" for c in v) + ")"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load hair strands and summarise them.")
    parser.add_argument("path", nargs="?", default=DEFAULT_DATA_PATH, help="hair .data file")
    args = parser.parse_args(argv)

    loader = HairLoader()
    try:
        print(f"Attempting to load hair data from: {args.path}")
        loader.load(args.path)
    except HairDataError as exc:
        print(f"Error loading hair data: {exc}", file=sys.stderr)
        return 1
    print("Successfully loaded hair data.")
    print(f"Number of strands loaded: {len(loader.strands)}")

    mesh = build_strand_mesh(loader.strands)
    print(f"Total vertices consolidated: {mesh.vertex_count}")
    print(f"Total indices created (incl. restarts): {len(mesh.indices)}")
    print("Hair data bounding box:")
    print(f"  Min: {_fmt(mesh.min_coord)}")
    print(f"  Max: {_fmt(mesh.max_coord)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())