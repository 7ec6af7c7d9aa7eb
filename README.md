# lightscene

A small, dependency-free toolkit for the math and data behind a simple lit
3D scene: vectors, 4×4 matrices, quaternions, rigid-body transforms,
procedural meshes (plane, cube, sphere), PPM image reading and writing, and a
window-independent model of an interactive scene with two walls, a ground
plane and a movable light sphere.

## Modules

| Module | What it holds |
| --- | --- |
| `lightscene.vec` | `Vec`, an immutable vector of floats of any length, plus `dot`, `cross`, `norm`, `norm2`, `normalize` and the constants `PI`, `EPS`, `EPS2`, `EPS3` |
| `lightscene.matrix4` | `Matrix4` (row-major 4×4, read with `m[row, col]`) with rotation, translation, scale, `make_frustum` and `make_projection` constructors and column-major conversion; `inv`, `transpose`, `normal_matrix`, `trans_fact`, `lin_fact`, `get_translation`, `is_affine`, `norm2` |
| `lightscene.quat` | `Quat` with rotation constructors; `dot`, `norm2`, `inv`, `normalize`, `quat_to_matrix`, `quat_pow` |
| `lightscene.rigtform` | `RigTForm`, a translation plus a quaternion rotation; `inv`, `trans_fact`, `lin_fact`, `rig_tform_to_matrix` |
| `lightscene.geometry` | `GenericVertex` and `make_plane`, `make_cube`, `make_sphere` with `plane_buffer_sizes`, `cube_buffer_sizes`, `sphere_buffer_sizes` |
| `lightscene.ppm` | `read_ppm`, `read_ppm_stream`, `write_ppm`, `PpmImage`, `PackedPixel`, `PpmError` |
| `lightscene.viewport` | `frust_fov_y`, `projection_matrix`, `help_text`, `MouseButton`, `ButtonState`, and `MouseTracker` for button state |
| `lightscene.scene` | `Scene`, which reacts to reshape, mouse, motion and keyboard events and yields `DrawCall`s; `make_ground` |

## Examples

Vectors and matrices:

```python
from lightscene.vec import Vec, cross
from lightscene.matrix4 import Matrix4, inv, get_translation

x = Vec(1.0, 0.0, 0.0)
y = Vec(0.0, 1.0, 0.0)
z = cross(x, y)                      # Vec(0.0, 0.0, 1.0)

m = Matrix4.make_translation(Vec(1.0, 2.0, 3.0)) * Matrix4.make_y_rotation(30)
back = inv(m)
print(get_translation(m))            # Vec(1.0, 2.0, 3.0)
```

Angles are in degrees. `inv` works on affine matrices only.

Quaternions and rigid transforms:

```python
from lightscene.quat import Quat, quat_to_matrix
from lightscene.rigtform import RigTForm, inv, rig_tform_to_matrix

q = Quat.make_z_rotation(90)
matrix = quat_to_matrix(q)

frame = RigTForm().with_rotation(q)
undo = inv(frame)
print(rig_tform_to_matrix(frame * undo))   # close to the identity
```

A `Quat` or `RigTForm` multiplied by a 4-component `Vec` transforms that vector.

Meshes:

```python
from lightscene.geometry import sphere_buffer_sizes, make_sphere

vertex_count, index_count = sphere_buffer_sizes(20, 20)
vertices, indices = make_sphere(0.5, 20, 20)
```

Each `make_*` function returns a list of `GenericVertex` (position, normal,
texture coordinate, tangent, binormal) and a list of triangle indices. A sphere
needs more than one slice and at least two stacks; otherwise `ValueError` is
raised.

PPM images:

```python
from lightscene.ppm import read_ppm, write_ppm, PpmError

try:
    image = read_ppm("texture.ppm")
except PpmError as err:
    print(f"could not load texture: {err}")

write_ppm("out.ppm", 2, 1, bytes([255, 0, 0, 0, 255, 0]))
```

Both `P3` (text) and `P6` (binary) files are read; comments starting with `#`
are skipped. A maximum colour value other than 255 issues a warning. Pixel
rows from `read_ppm` are stored bottom row first, ready to upload as a texture;
`write_ppm` takes RGB bytes listed bottom row first and writes a `P6` file top
row first. Data of the wrong length raises `ValueError`.

Driving the scene:

```python
from lightscene.scene import Scene
from lightscene.viewport import MouseButton, ButtonState

scene = Scene()
scene.reshape(800, 600)
scene.mouse(MouseButton.RIGHT, ButtonState.DOWN, 100, 100)
scene.motion(120, 90)                # moves the light sphere
for call in scene.draw_calls():
    print(call.geometry, call.use_texture, call.sphere)
print(scene.eye_light())
```

`draw_calls` lists the ground, the two walls and the light sphere in drawing
order, each with its model-view matrix, normal matrix, colour and texture
setting; the mesh data is in `scene.meshes` under the same names
(`"ground"`, `"cube"`, `"sphere"`). The shader and texture file names a
renderer would load are in `SHADER_FILES` and `TEXTURE_FILES`.

Mouse drags move the light sphere: the left button rotates it, the right
button slides it in the view plane, and the middle button (or left and right
together) moves it toward or away from the eye. `motion` returns whether the
scene changed. `keyboard` handles keys: `1` and `2` switch between
diffuse-only and diffuse-plus-specular shading (`active_shader`), `o` selects
the light sphere, `h` returns the help text, `s` sets `pending_screenshot` to
`"out.ppm"`, and Escape raises `SystemExit`.

## What it does not do

There is no window, no renderer and no command to run. The package does not
compile shaders, upload textures or draw anything, and a screenshot request
only records a file name: reading back pixels and saving them with
`write_ppm` is up to whatever renders the scene.

## Errors

Invalid or truncated PPM data, and files that cannot be opened, raise
`PpmError`. Operations that need a non-degenerate input, such as normalizing
a zero vector, inverting a zero quaternion, or inverting a singular or
non-affine matrix, raise `ValueError`.