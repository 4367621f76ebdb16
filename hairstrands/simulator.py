"""Flattening hair strands into per-particle arrays for simulation."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from typing import Iterable, Sequence


def _floats() -> array:
    return array("f")


def _ints() -> array:
    return array("i")


@dataclass
class ParticleData:
    """Structure-of-arrays layout of all particles of all strands."""

    pos_x: array = field(default_factory=_floats)
    pos_y: array = field(default_factory=_floats)
    pos_z: array = field(default_factory=_floats)
    strand_indices: array = field(default_factory=_ints)
    particle_indices_in_strand: array = field(default_factory=_ints)

    @property
    def num_total_particles(self) -> int:
        return len(self.pos_x)


class HairSimulator:
    """Holds the particle arrays of a hair model and its position buffer."""

    def __init__(self) -> None:
        self.data = ParticleData()
        self._positions = _floats()

    def initialize(self, raw_strands: Iterable[Sequence]) -> ParticleData:
        """Replace the current state with the particles of ``raw_strands``."""
        self.release()
        data = ParticleData()
        for strand_idx, strand in enumerate(raw_strands):
            for particle_idx, particle in enumerate(strand):
                x, y, z = particle
                data.pos_x.append(x)
                data.pos_y.append(y)
                data.pos_z.append(z)
                data.strand_indices.append(strand_idx)
                data.particle_indices_in_strand.append(particle_idx)
        self.data = data
        self._positions = array("f", bytes(4 * 3 * data.num_total_particles))
        return data

    def release(self) -> None:
        """Drop all particle data and the position buffer."""
        self.data = ParticleData()
        self._positions = _floats()

    def position_buffer(self) -> array:
        """The writable buffer of interleaved xyz positions, three floats per particle."""
        return self._positions

    def __enter__(self) -> "HairSimulator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()