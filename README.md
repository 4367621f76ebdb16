# hairstrands

Tools for working with hair strand data: read `.data` strand files, flatten
strands into per-particle arrays, combine them into one indexed line-strip
mesh with primitive-restart separators, and compute view and projection
matrices for a simple fly-through camera. Small fixed-size vector types and
vector helpers come with it. There are no dependencies outside the standard
library.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite with pytest.

## The `.data` format

A little-endian binary file:

1. a 32-bit signed strand count, which must be positive;
2. for each strand, a 32-bit signed particle count, which must be positive,
   followed by that many `x, y, z` triples of 32-bit floats.

Nothing may follow the last strand. After loading, strands with fewer than
two particles are dropped.

## Loading strands

```python
from hairstrands.hair_loader import HairLoader, HairDataError

loader = HairLoader()
try:
    loader.load("strands00001.data")
except HairDataError as exc:
    print("could not load:", exc)
else:
    print(len(loader.strands), "strands")
```

`HairLoader.load` only accepts paths ending in `.data`; any other extension
raises `HairDataError`. `load_data` reads a file whatever its name, and
`clean_data` removes strands with fewer than two points. A file that cannot be
opened, is truncated, has a non-positive count or has bytes after the last
strand also raises `HairDataError` (a subclass of `RuntimeError`). Each strand
is a list of `Float3` points.

## Vectors

`hairstrands.vectors` provides immutable `Float2`, `Float3`, `Float4`,
`Int2`, `Int3`, `Int4`, `UInt2`, `UInt3` and `UInt4` with component-wise
`+`, `-` and `*` against a vector of the same type or a scalar. Float vectors
also support `/` and negation (division by zero gives `inf` or `nan` rather
than raising); int vectors support negation and wrap like 32-bit signed
integers; uint vectors wrap modulo 2**32. `Type.splat(s)` builds a vector with
every component equal to `s`, and `convert(v, cls, *extra)` changes a vector's
type, dropping components or filling them from `extra` and then zeros.

`hairstrands.vecmath` has `lerp`, `clamp`, `vmin`, `vmax`, `dot`, `length`,
`normalize`, `floor`, `frac`, `fmod`, `vabs`, `reflect`, `cross` and
`smoothstep`, working on scalars or vectors as appropriate.

```python
from hairstrands.vectors import Float3
from hairstrands.vecmath import cross, dot, normalize

n = normalize(cross(Float3(1, 0, 0), Float3(0, 1, 0)))   # Float3(0, 0, 1)
print(dot(n, Float3(2, 3, 4)))                           # 4.0
```

## Particle arrays and meshes

```python
from hairstrands.simulator import HairSimulator
from hairstrands.mesh import build_strand_mesh

with HairSimulator() as sim:
    data = sim.initialize(loader.strands)
    print(data.num_total_particles)
    buffer = sim.position_buffer()   # zero-filled floats, x, y, z per particle

mesh = build_strand_mesh(loader.strands)
print(mesh.vertex_count, len(mesh.indices))
print(mesh.min_coord, mesh.max_coord)
```

`ParticleData` holds `pos_x`, `pos_y`, `pos_z`, `strand_indices` and
`particle_indices_in_strand` as `array` objects. `release()` (also called on
leaving the `with` block) empties the arrays and the position buffer.

`build_strand_mesh` skips strands with fewer than two points and separates
strips with the restart index `0xFFFFFFFF` (no marker after the last strip).
`StrandMesh.vertex_data()` and `index_data()` return the vertices as packed
little-endian 32-bit floats and the indices as packed unsigned 32-bit
integers.

## Camera

```python
from hairstrands.camera import Camera, Movement

camera = Camera()
camera.on_mouse(420.0, 310.0)
camera.on_scroll(2.0)
camera.move(Movement.FORWARD)
view = camera.view_matrix()
projection = camera.projection_matrix(800, 600)
```

Pitch is kept within ±89 degrees and the field of view within 1–45 degrees.
`move` also accepts the movement names `"forward"`, `"backward"`, `"left"`
and `"right"`. `projection_matrix` raises `ValueError` for a non-positive
width or height. Both matrices are lists of 16 floats in column-major order;
`calculate_lookat(eye, center, up)` and
`calculate_perspective(fovy, aspect, near, far)` are also available on their
own.

## Command line

```
hairstrands path/to/strands.data
```

loads the file (by default `../data/strands00001.data`) and prints the strand
count, the number of consolidated vertices and indices, and the bounding box
of the hair. It exits with status 1 and a message on standard error if the
file cannot be loaded.

## What it does not do

The package does not open a window, draw anything or talk to a GPU. It
prepares the data, the mesh buffers and the camera matrices that a renderer
would use; the position buffer of `HairSimulator` is plain memory and no
simulation step is run on it.