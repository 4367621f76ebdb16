"""Reading hair strand files in the binary ``.data`` format.

The file holds a 32-bit strand count, then for each strand a 32-bit point
count followed by that many points of three 32-bit floats, all little-endian.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from .vectors import Float3

_COUNT = struct.Struct("<i")
_POINT = struct.Struct("<3f")


class HairDataError(RuntimeError):
    """A hair data file could not be read or is malformed."""


def _read_count(stream: BinaryIO) -> int | None:
    raw = stream.read(_COUNT.size)
    if len(raw) < _COUNT.size:
        return None
    return _COUNT.unpack(raw)[0]


@dataclass
class HairLoader:
    """Loads hair strands, each a list of Float3 points."""

    strands: list[list[Float3]] = field(default_factory=list)

    def load_data(self, fn):
        """Read a ``.data`` file, then drop strands with fewer than two points."""
        path = os.fsdecode(fn)
        self.strands = []
        try:
            stream = open(path, "rb")
        except OSError as exc:
            raise HairDataError(f"Cannot open hair data file: {path}") from exc

        strands: list[list[Float3]] = []
        with stream:
            num_strands = _read_count(stream)
            if num_strands is None:
                raise HairDataError(f"Error reading strand count from file: {path}")
            if num_strands <= 0:
                raise HairDataError(f"Invalid number of strands in file: {num_strands}")

            for _ in range(num_strands):
                num_points = _read_count(stream)
                if num_points is None:
                    raise HairDataError(
                        f"Error reading particle count for a strand from file: {path}"
                    )
                if num_points <= 0:
                    raise HairDataError(
                        f"Invalid number of particles in a strand: {num_points}"
                    )
                size = _POINT.size * num_points
                raw = stream.read(size)
                if len(raw) < size:
                    raise HairDataError(
                        f"Error reading particle data for a strand from file: {path}"
                    )
                strands.append([Float3(*p) for p in _POINT.iter_unpack(raw)])

            if stream.read(1):
                raise HairDataError(f"Unexpected extra data at the end of file: {path}")

        self.strands = strands
        self.clean_data()

    def clean_data(self):
        """Remove strands that are empty or a single point."""
        self.strands = [strand for strand in self.strands if len(strand) > 1]

    def load(self, fn):
        """Load a hair file, choosing the reader by its extension."""
        path = os.fsdecode(fn)
        dot = path.rfind(".")
        ext = path[dot:] if dot != -1 else ""
        if ext != ".data":
            raise HairDataError(
                f"Unsupported file extension: '{ext}'. "
                f"Only '.data' is supported for file: {path}"
            )
        self.load_data(path)