# splice

The core of a small 2D game framework. It is written in plain Python and has
no third-party dependencies.

## What is in it

| Module | Contents |
| --- | --- |
| `splice.vector` | `Vec2` and `Vec3` are immutable vectors with arithmetic, `dot`, `cross`, `length` and `normalized`. `Vec2` also has angle and rotation helpers. The module also holds `deg_to_rad`, `rad_to_deg`, `floor`, `clamp`, `point_in_rectangle`, `rotate_vectors` and `rotate_vectors_degree`. |
| `splice.matrix` | `Matrix` is a general row-major matrix. `Matrix22` and `Matrix33` add `identity`, `rotation` / `rotation_z`, `scale`, `translation` (3x3 only) and `transform`. |
| `splice.color` | Packing helpers `unite_rgb`, `split_rgb`, `unite_bgr` and `split_bgr`, the `ColorRGB` and `ColorBGR` types, and `as_rgb`. |
| `splice.vertex_buffer` | `TextureVertexBuffer` is a four-corner quad that stores position, colour, alpha and UV for each vertex. `ColorAlpha` pairs a drawing colour with an opacity. |
| `splice.input` | `ButtonInput` tracks press, hold and release per frame. `MouseInput` adds the cursor position and a scroll callback. `Input` holds both the keyboard and the mouse. The enums are `InputState`, `KeyId` and `MouseButtonId`. |
| `splice.camera` | `Camera` maps window coordinates to scene coordinates with `window_to_scene`. It can save and restore its state with `push` and `pop`. |
| `splice.log` | The `Level` enum and `level_name`. |
| `splice.entity` | `EntitySystem`, `Entity`, `EntityComponent`, `EventProcessor`, `ImmediateEventProcessor`, `ZSortEventProcessor` (deepest entity first), `EventFlag`, `Event` and the `Depth` constants. |
| `splice.texts` | Localised UI strings: `Language`, `Text`, `initialize_texts`, `get_text` and `draw_text_label`. |
| `splice.gui.element` | `Canvas` records draw commands. `MouseData` and the shared `mouse_data` hold the mouse state for the GUI. Also the `Element`, `Container` and `TextManager` bases. |
| `splice.gui.button` | `ButtonBase`, `TextButton`, `ImageButton`, `CustomDrawingButton` and `HighlightStyle`. |
| `splice.gui.label` | `Label`. |
| `splice.gui.slider` | `Slider`. |
| `splice.gui.page` | `Page`, `DraggablePage`, and `DraggableResizablePage`, which snaps its size to a grid of cells. |
| `splice.gui.manager` | `GUI`, whose `work` runs one frame, and `current_gui`, `set_gui`, `unset_gui` and `set_or_unset_gui`. |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Vectors and matrices:

```python
from splice.vector import Vec2
from splice.matrix import Matrix33

v = Vec2(3.0, 4.0)
print(v.length())                      # 5.0
m = Matrix33.translation(Vec2(1.0, 2.0))
print(m.transform(v))                  # Vec2(x=4.0, y=6.0)
```

Input state advances once per frame, when `process` is called:

```python
from splice.input import Input, KeyId

inp = Input()
inp.keyboard.button_callback(KeyId.A, 1)   # 1 is a press, 0 a release
inp.process()
assert inp.keyboard.pressed(KeyId.A)
assert inp.keyboard.holding(KeyId.A)
inp.process()
assert not inp.keyboard.pressed(KeyId.A)   # PRESS lasts one frame
assert inp.keyboard.holding(KeyId.A)
```

Entities hold at most one component of each type. Components are routed to
event processors according to their `event_flags`:

```python
from splice.entity import EntityComponent, EntitySystem, EventFlag

class Mover(EntityComponent):
    def event_flags(self):
        return EventFlag.UPDATE

    def process_event(self, event):
        frame_time = event.params[0]
        self.entity.rotate(frame_time)

system = EntitySystem()
entity = system.spawn_entity()
entity.create_component(Mover)
system.process_update(0.5)
print(entity.rotation)   # 0.5
```

Localised UI strings:

```python
from splice.texts import Language, Text, initialize_texts, get_text

initialize_texts(Language.ENGLISH)
print(get_text(Text.OK))   # "OK"
```

A GUI frame draws to a `Canvas`. The canvas only records commands. Each entry
in `canvas.commands` is a `RectangleCommand`, `LineCommand`, `TextCommand` or
`SpriteCommand`:

```python
from splice.camera import Camera
from splice.gui.button import TextButton
from splice.gui.element import Canvas
from splice.gui.manager import GUI
from splice.input import InputState
from splice.texts import Language, Text, initialize_texts
from splice.vector import Vec2

initialize_texts(Language.ENGLISH)
gui = GUI()
gui.add_element(TextButton(lambda: print("clicked"), Text.OK, Vec2(100.0, 50.0)))

camera = Camera()
camera.window_size = camera.view_size = Vec2(1280, 720)
canvas = Canvas()
gui.work(canvas, camera, Vec2(100.0, 50.0), InputState.PRESS)   # prints "clicked"
print(len(canvas.commands))
```

## What it does not do

This package holds the logic and the data of a game framework. It does not
provide the parts that talk to the system:

- It opens no window and runs no main loop.
- It does not render. `Canvas` records draw commands, and another program has
  to draw them. Text size comes from a fixed character width and line height,
  not from a font.
- It does not read devices. Input events reach `ButtonInput.button_callback`
  and `MouseInput.position_callback` only when your own code calls them.
- It plays no audio and loads no assets.
- It writes no log files. `splice.log` only defines the severity levels and
  their names.
- When a resizable page wants the resize cursor, it sets
  `DraggableResizablePage.cursor` to `"resize_nwse"`. Changing the actual
  cursor is up to the caller.