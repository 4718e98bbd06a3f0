# grafengine

The scene, camera and mesh core of a small 3D engine. It holds everything that
can be computed without a window or a GPU. Matrices are 4×4 numpy arrays.

## Modules

- `grafengine.transform`: `Transform` stores a position, Euler angles in degrees
  and a scale. It keeps `world_matrix` (translate @ rotation @ scale) and
  `rotation_matrix` in step with them. It exposes the local axes `right`, `up`
  and `look`. `rotate_local_x/y/z` and `rotate_global_x/y/z` rotate it.
  `move_forward`, `move_backward`, `move_right`, `move_left`, `move_up` and
  `move_down` step it one unit along its own axes. The helpers `rotation_matrix`,
  `translation_matrix` and `scale_matrix` build the matrices. A translation sits
  in the last column (`matrix[:3, 3]`).
- `grafengine.camera`: `Camera` has a field of view in degrees, an aspect ratio,
  and near and far planes. Its `projection_matrix` comes from the left-handed
  `perspective_lh`. Its `view_matrix` is built from its `transform`. `turn_lr`
  changes the yaw and `turn_ud` changes the pitch.
- `grafengine.mouse`: `Mouse` records the current and previous pointer
  coordinates. The value -1 means "never set".
- `grafengine.settings`: `Settings` is a dataclass holding the screen size and
  the top-camera inset size. Its defaults are 1920×1080 and 500×400. It has
  `main_aspect`, `top_camera_aspect` and `top_camera_viewport`.
- `grafengine.mesh`: `VertexAttributeType`, `Vertex` and `Mesh`. A `Mesh` has
  a stride, attribute offsets, an index count and interleaved float32 data.
  `attribute_size` gives the size of one attribute.
- `grafengine.primitives`: `square`, `circle` and `cylinder`, together with the
  normal helpers `find_normals` and `average_normals`.
- `grafengine.solids`: `cube`, `frustum` and `pyramid`.
- `grafengine.shapes`: the `ShapeType` enum and `ShapeCreator`. `ShapeCreator`
  builds each mesh once and caches it.
- `grafengine.idcounter`: `IdCounter` hands out ids starting at 11 and maps
  each id to its object.
- `grafengine.worldobject`: `WorldObject` has an id, a transform, a shape, a
  texture name, a shader program name, a texture repeat and child objects.
- `grafengine.cursor`: `Cursor` is an upside-down marker. It bobs above a target
  object each time `calculate_position` is called.
- `grafengine.playable_object`: `PlayableObject` is a world object that carries
  a camera. `keyboard` moves it and `mouse` turns it. The `Key` and `Action`
  enums give the input codes.
- `grafengine.scene`: `Scene` holds the world objects, the playable objects, the
  active object, the active and top cameras, and the cursor. Its `keyboard` and
  `mouse` methods pass input on and edit the active object. `update_cursor`
  moves the cursor.
- `grafengine.save`: JSON serialisation of vectors, matrices, transforms,
  cameras, objects and scenes. Matrices are stored column by column.
  `SaveStore` writes a scene to a directory and reads it back. Its defaults are
  `./save_files/newSave.json`.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from grafengine.settings import Settings
from grafengine.idcounter import IdCounter
from grafengine.scene import Scene
from grafengine.playable_object import Key, Action
from grafengine.save import SaveStore

settings = Settings()
counter = IdCounter()
scene = Scene(settings, counter)

scene.keyboard(Key.W, 0, Action.PRESS)   # move the active camera forward
scene.keyboard(Key.O, 0, Action.PRESS)   # grow the active object
print(scene.update_cursor())

store = SaveStore("save_files", "newSave.json")
store.save(scene)

if store.exists():
    restored = store.load(settings, IdCounter())
```

## What it does not do

The package does not open a window or draw anything. It has no shader
programs, no texture loading and no GPU buffers. Meshes and matrices are only
computed, so something else has to display them. It installs no command.