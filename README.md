# blockmaze

A small block maze game drawn with pygame. It opens a 1280×720 window,
shows a title screen, and switches to a play screen that draws the maze
stage and the player sprite.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Playing

```
blockmaze
```

Keys:

- `P` on the title screen starts play.
- `T` on the play screen goes back to the title.
- `Esc` or closing the window quits.

The loop runs at most one frame every 16 milliseconds. Images are loaded
from `data/image/` relative to the working directory: `chara.png` for the
player and `parts.png` for the stage tiles.

## What the game does not do yet

The play screen only draws. The player is drawn at the top-left corner and
does not move, and nothing checks whether the goal tile in the stage has
been reached. There is no scoring, no saved progress and no level other
than the single fixed grid in `blockmaze.stage.MAP`.

## Using the framework

The game is built from a few reusable pieces:

- `blockmaze.gameobject.GameObject` is the base for anything that lives in a
  scene. Override `start`, `update` and `draw(canvas)`. Call `destroy()` to
  have it removed before its next update; `destroyed` tells whether that was
  requested. Objects carry a `tag`, checked with `is_tag`, and optional
  `scene` and `parent` references.
- `blockmaze.scene.Scene` holds game objects. `push(obj)`,
  `instantiate(cls)` (calls `cls()`) and `create_game_object(cls)` (calls
  `cls(scene)`) add objects; `find_game_object`, `find_game_objects`,
  `find_game_object_with_tag` and `find_game_objects_with_tag` look them up
  by class and tag; `delete_game_object`, `delete_all_game_objects` and
  `all_objects` manage them. `set_draw_order(obj, order)` sets the draw
  priority: lower values are drawn first, and the default is 100.
- `blockmaze.scenemanager.SceneManager` runs the current scene alongside a
  common scene that lives for the whole session. `change_scene(name)` takes
  effect at the start of the next `update`; `update` and `draw` raise
  `RuntimeError` before `start` has been called.
- `blockmaze.scenes` holds `BootScene`, `TitleScene` and `PlayScene`, and
  `SceneFactory`, which maps the names `"TitleScene"` and `"PlayScene"` to
  scenes and raises `ValueError` for any other name. Scenes read keys
  through a `keyboard` callable that takes a pygame key code.
- `blockmaze.app.App` ties a `FrameClock` to a `SceneManager` with
  `init`, `update`, `draw`, `release`, `exit` and `is_exit`.
  `blockmaze.app.PygameCanvas` is the canvas the game draws on: it offers
  `draw_rect_graph` and `draw_string` over a pygame surface.
- `blockmaze.resources.ResourceLoader` loads images (`load_graph`), sounds
  (`load_sound`) and models (`load_model`) once per file name and returns
  the cached result; models are copied on each request. `load_folder`
  loads every recognised file in a directory, optionally recursively.
  With `async_loading=True` the load methods return
  `concurrent.futures.Future` objects and `is_loading` reports unfinished
  loads. `release_all` forgets everything.
- `blockmaze.clock.FrameClock` measures the time between frames, and
  `blockmaze.clock.Timer` measures the time since it was started or
  restarted. Both take an optional clock function for testing.
- `blockmaze.vector2.Vector2` and `blockmaze.vector2.circle_hit` give 2D
  vector arithmetic and circle collision; `blockmaze.linalg` offers
  `Vector3`, 4×4 `Matrix` and `deg_to_rad` / `rad_to_deg`.
- `blockmaze.debugscreen.DebugScreen` collects debug text and draws it for
  one frame. The boot scene places one in the common scene, drawn on top of
  everything. `debug_puts`, `debug_printf` and `debug_set_color` reach it
  through a scene and raise `LookupError` if the scene holds none.

A minimal object:

```python
from blockmaze.gameobject import GameObject
from blockmaze.scene import Scene


class Counter(GameObject):
    def start(self):
        self.ticks = 0

    def update(self):
        self.ticks += 1
        if self.ticks == 3:
            self.destroy()


scene = Scene()
counter = scene.instantiate(Counter)
for _ in range(4):
    scene.update()
print(scene.all_objects())  # []
```

## Running the tests

```
pip install .[test]
pytest
```