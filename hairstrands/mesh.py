"""Combining strands into one indexed line-strip mesh with primitive restart."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .vectors import Float3

PRIMITIVE_RESTART_INDEX = 0xFFFFFFFF
FLT_MAX = 3.4028234663852886e38

_VERTEX = struct.Struct("<3f")


@dataclass
class StrandMesh:
    """Vertices of all strands, strip indices separated by restart markers, and bounds."""

    vertices: list[Float3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    min_coord: Float3 = field(default_factory=lambda: Float3(FLT_MAX, FLT_MAX, FLT_MAX))
    max_coord: Float3 = field(default_factory=lambda: Float3(-FLT_MAX, -FLT_MAX, -FLT_MAX))
    restart_index: int = PRIMITIVE_RESTART_INDEX

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def vertex_data(self) -> bytes:
        """Vertices packed as little-endian 32-bit floats, xyz per vertex."""
        return b"".join(_VERTEX.pack(*v) for v in self.vertices)

    def index_data(self) -> bytes:
        """Indices packed as little-endian unsigned 32-bit integers."""
        return struct.pack(f"<{len(self.indices)}I", *self.indices)


def build_strand_mesh(strands: Iterable[Sequence[Float3]]) -> StrandMesh:
    """Build a mesh from strands, skipping those with fewer than two points."""
    mesh = StrandMesh()
    lo = list(mesh.min_coord)
    hi = list(mesh.max_coord)
    for strand in strands:
        if len(strand) < 2:
            continue
        offset = len(mesh.vertices)
        mesh.vertices.extend(strand)
        mesh.indices.extend(range(offset, offset + len(strand)))
        mesh.indices.append(PRIMITIVE_RESTART_INDEX)
        for vertex in strand:
            lo = [min(a, b) for a, b in zip(lo, vertex)]
            hi = [max(a, b) for a, b in zip(hi, vertex)]
    if mesh.indices:
        mesh.indices.pop()
    mesh.min_coord = Float3(*lo)
    mesh.max_coord = Float3(*hi)
    return mesh