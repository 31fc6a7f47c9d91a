# codedrills

A few small, self-contained building blocks.

- `codedrills.lrucache.LRUCache` is a fixed-capacity least-recently-used
  cache. `get` returns `-1` for a missing key. Reading or writing a key makes
  it the most recent one. When a new key arrives and the cache is full, the
  least recently used key is evicted. A capacity below 1 raises `ValueError`.
  The cache supports `len()` and `in`.
- `codedrills.hashmap.HashMap` maps integer keys using separate chaining
  over 10007 buckets. `get` returns `-1` for a missing key, and `remove` of a
  missing key does nothing. It supports `len()` and `in`.
- `codedrills.transforms` holds 4×4 matrix helpers built on numpy, for column
  vectors: `perspective` (field of view in radians), `look_at`, `translate`,
  `rotate`, `scale` (a number or a 3-vector) and `normal_matrix` (the inverse
  transpose). Bad shapes and degenerate inputs raise `ValueError`.
- `codedrills.sphere.build_sphere(radius=1.0, sectors=36, stacks=18)` returns
  a `SphereMesh` for a UV sphere with its poles on the z axis.
  - `vertices` has rows of `x, y, z, nx, ny, nz` as float32.
  - `indices` lists the triangle indices as uint32.
  - The `positions`, `normals` and `triangles` properties give views of the
    same data.
- `codedrills.solar` models a small solar system: a sun, two planets
  (`CelestialBody`) and a moon that orbits the second planet. It also has a
  camera that orbits the origin.
  - `SolarSystem.step(current_time)` advances the scene to a clock reading.
  - `on_mouse_button`, `on_mouse_move` and `on_scroll` turn and zoom the
    camera. Pitch is kept within ±1.5 radians and distance within 3 to 50.
  - `view_matrix()` and `projection_matrix()` return the camera matrices.
  - `model_matrices()` returns one `RenderItem` each for the sun, the planets
    and the moon. Each item carries its model matrix, normal matrix and colour.

## Install

    pip install .

## Usage

```python
from codedrills.lrucache import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)     # 1
cache.put(3, 3)  # evicts key 2
cache.get(2)     # -1
```

```python
from codedrills.hashmap import HashMap

m = HashMap()
m.put(1, 1)
m.get(1)      # 1
m.remove(1)
m.get(1)      # -1
```

```python
from codedrills.solar import SolarSystem

system = SolarSystem()
system.on_scroll(2.0)        # zoom in by one unit
system.step(0.016)
view = system.view_matrix()
projection = system.projection_matrix()
for item in system.model_matrices():
    print(item.kind, item.color)
```

## Commands

Each command runs a short demonstration and prints its lookup results:

    codedrills-lru
    codedrills-hashmap

## What it does not do

`codedrills.solar` is headless. It keeps the scene state and computes the
matrices and mesh data, but it opens no window and draws nothing. It has no
shaders, no event loop and no command to start an animated view. To see the
scene, feed `model_matrices()`, `view_matrix()`, `projection_matrix()` and a
`build_sphere()` mesh to a renderer of your choice. Forward that renderer's
mouse and scroll events to the `on_*` methods.

## Tests

    pip install ".[test]"
    pytest