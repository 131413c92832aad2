# phantomcore

The core pieces of a small game engine, in plain Python with no third-party
dependencies:

- **`phantomcore.vector`**: `Vec2`, `Vec3` and `Vec4`, mutable float vectors
  with in-place `add`/`subtract`, `dot`, `Vec3.cross`, `Vec3.normalize`, and
  the angle helpers `to_radians` and `to_degrees`.
- **`phantomcore.mat3`**: the column-major 3×3 matrix `Mat3` with
  `transpose`, `inverse` (raising `SingularMatrixError`) and `is_close`.
- **`phantomcore.mat4`**: the column-major 4×4 matrix `Mat4` with
  `translation`, `rotation` (degrees), `scaling`, `orthographic`,
  `perspective` (field of view in radians), `look_at`, `transpose` and
  `inverse`, plus `rotation_x`, `rotation_y`, `rotation_z`, `scale_matrix`,
  `with_translation`, `polar_decompose`, `compose` and `decompose`.
- **`phantomcore.portable`**: `align` to round up to a power of two, the
  four-character-code packers `fourcc_i32`, `fourcc_u32` and `fourcc_u16`, and
  the byte-order helpers `to_native_unsigned` and `to_network_unsigned`.
- **`phantomcore.curves`**: `Curve` and `Bezier` key-frame curves tagged with a
  `CurveType`, and the root finder `newton_raphson`.
- **`phantomcore.sort`**: in-place `heap_sort`, `quick_sort` and `bubble_sort`.
- **`phantomcore.events`**: a process-wide `EventManager` that calls handlers
  registered per event id when an `Event` is dispatched; `EventId` names the
  ids `TICK` and `LOADSCENE_COMPLETED`.
- **`phantomcore.config`**: `GfxConfiguration` for colour, depth, stencil, MSAA
  and screen settings, the abstract `RuntimeModule` interface
  (`init`, `shutdown`, `tick`) and the abstract `BaseApplication`.
- **`phantomcore.assets`**: `AssetLoader`, which finds files under `Assets/`
  folders along a list of search paths and up to ten parent directories.

## Installation

```
pip install phantomcore
```

Python 3.10 or later is required.

## Examples

### Vectors and matrices

```python
from phantomcore.vector import Vec3, to_radians
from phantomcore.mat4 import Mat4, compose, decompose

up = Vec3(0.0, 1.0, 0.0)
forward = Vec3(0.0, 0.0, -1.0)
side = up.cross(forward)

view = Mat4.look_at(Vec3(0.0, 2.0, 5.0), Vec3(0.0, 0.0, 0.0), up)
projection = Mat4.perspective(to_radians(45.0), 16 / 9, 0.1, 1000.0)
view_projection = projection * view

model = compose(Vec3(0.0, 0.5, 0.0), Vec3(1.0, 1.0, 1.0), Vec3(3.0, 0.0, -2.0))
rotation, scale, translation = decompose(model)
```

Matrices are immutable; every operation returns a new `Mat4` or `Mat3`.
`Mat4 * Vec4` transforms a vector. `decompose` splits the upper 3×3 part with
`polar_decompose` and returns Euler angles in radians, the scale and the
translation.

### Bézier animation curves

```python
from phantomcore.curves import Bezier

curve = Bezier(knots=[0.0, 1.0], incoming=[0.0, 0.7], outgoing=[0.3, 1.0])

s, index = curve.reverse(0.25)      # segment parameter and segment index
value = curve.interpolate(s, index)  # evaluate that segment at s
```

`reverse` clamps times before the first knot to `(0.0, 0)` and times after the
last knot to `(1.0, len(knots))`. Knots and control points can also be added
one at a time with `add_knot` and `add_control_points`.

### Sorting

```python
from phantomcore.sort import bubble_sort, heap_sort, quick_sort

items = [57, 68, 59, 52, 72, 28, 96, 33, 24]
quick_sort(items, 0, len(items))     # right end is exclusive
heap_sort(items)                     # whole list
bubble_sort(items, 0, len(items) - 1, ascending=False)  # right end inclusive
```

### Events

```python
from phantomcore.events import Event, EventId, EventManager

def on_scene_loaded(event):
    print("scene ready:", event.id)

manager = EventManager.instance()
manager.add_event_handler(EventId.LOADSCENE_COMPLETED, on_scene_loaded)
manager.dispatch_event(Event(EventId.LOADSCENE_COMPLETED))
manager.remove_event_handler(EventId.LOADSCENE_COMPLETED, on_scene_loaded)
```

Handlers are any callables taking the event. The same handler may be
registered more than once and is then called once per registration;
`remove_event_handler` drops the first registration only, and
`clear_event_handlers` forgets all handlers for an id.

### Configuration and applications

```python
from phantomcore.config import BaseApplication, GfxConfiguration

class Game(BaseApplication):
    def create_main_window(self):
        ...

game = Game(GfxConfiguration(screen_width=960, screen_height=540, app_name="Game"))
game.init()            # prints the configuration
while not game.is_quit():
    game.tick()
    if game.frame_count >= 3:
        game.shutdown()
```

### Loading assets

```python
from phantomcore.assets import AssetLoader

loader = AssetLoader()
loader.add_search_path("game")
if loader.file_exists("Scenes/level1.txt"):
    text = loader.read_text("Scenes/level1.txt")
data = loader.read_binary("Textures/logo.bin")
```

`AssetLoader` tries `<search path>/Assets/<name>` for every search path and
then `Assets/<name>`, climbing one directory at a time up to ten levels.
`open_file`, `read_text` and `read_binary` raise `FileNotFoundError` when no
candidate exists.

## What the package does not do

There is no renderer, window or input handling: `BaseApplication` leaves
`create_main_window` to subclasses. The package does not decode image files;
`AssetLoader.read_binary` returns raw bytes and it is up to the caller to
interpret them. There is no command-line program.

## Running the tests

```
pip install "phantomcore[test]"
pytest
```