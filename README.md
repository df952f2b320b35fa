# dwarfgame

A small top-down arcade game. You play a dwarf walking around a tile board.
Chop logs with your axe to collect wood, pick up potions to restore health,
and shout to throw fireballs, which costs wood. Achievements unlock when you
collect six potions and when you shout five times; they are announced on
standard output.

Inside, the game runs on an entity-component-system: entities carry
components such as position, velocity, collider, health and time-to-live,
and systems update them each frame.

## Installing

```
pip install .
```

This also installs `pygame`, which handles the window, drawing, input and sound.

## Running

Run the game from a directory that holds its assets:

```
dwarfgame
```

By default the level is read from `levels/lvl0.txt`. Another level file can be
given as the only argument:

```
dwarfgame levels/other.txt
```

The game expects these files, relative to the current directory:

- the level file
- `img/floor.png` and `img/wall.png`: the board textures
- `img/log.png`, `img/potion.png` and `img/fire.png`: the item textures
  (a texture that cannot be loaded is simply not drawn)
- `img/DwarfSpriteSheet_data.txt`: the dwarf's sprite-sheet description,
  and the image it refers to
- `font/AmaticSC-Regular.ttf`: the font for the FPS counter and pause banner
- the sound files `FireBall.flac`, `AxeSwing.wav` and `CollectItemAudio.wav`.
  Missing sounds are skipped without an error.

### Level format

Each line of the level file is one row of the board, and every row should be
as long as the first. Each character is one tile:

| Char | Meaning                          |
|------|----------------------------------|
| `.`  | corridor                         |
| `w`  | wall                             |
| `x`  | log, on a corridor tile          |
| `p`  | potion, on a corridor tile       |
| `*`  | player start, on a corridor tile |

The last line of the file is not counted in the board's height, so the file
must end with a newline after its last row.

### Sprite-sheet format

A sprite-sheet description is a text file of lines; lines starting with `#`
are ignored:

```
Texture img/dwarf.png
Size 64 64
Scale 1.5 1.5
AnimationType Directional
Animation Idle 0 3 0 0.2 -1 -1
```

`Animation` takes a name, then the start frame, end frame, row, seconds per
frame, and the first and last frames of the action window (`-1` for none).
The image holds one block of rows for facing right, followed by one for
facing left. The dwarf uses the animations `Idle`, `Walk`, `Attack` and
`Shout`.

## Controls

| Key            | Action                                   |
|----------------|------------------------------------------|
| W A S D        | move (default control scheme)            |
| Arrow keys     | move (after switching with Enter)        |
| Enter          | switch between WASD and arrow keys       |
| Space          | attack with the axe (chops logs)         |
| Left Shift     | shout (throws a fireball)                |
| Escape         | pause or resume                          |
| F5             | toggle fullscreen                        |

A fireball costs 20 wood and can be thrown at most once every three seconds.
Bounding boxes are outlined in green, since `Game` is created with
`draw_debug=True` by default.

## Using the pieces

The building blocks can also be used on their own. For example:

```python
from dwarfgame.vector2 import Vector2
from dwarfgame.rectangle import Rectangle
from dwarfgame.bitmask import Bitmask

v = Vector2(3.0, 4.0)
v.magnitude()            # 5.0

box = Rectangle(Vector2(0, 0), Vector2(10, 10))
box.inside(5, 5)         # True

mask = Bitmask()
mask.turn_on_bit(2)
mask.get_bit(2)          # True
```

`Game` (from `dwarfgame.game`) takes an `ecs_method` of `EcsMethod.BIG_ARRAY`,
`EcsMethod.ARCHETYPES` or `EcsMethod.PACKED_ARRAY` (from `dwarfgame.ecs`).
Entities are then held in a plain list or in a `PackedArrayManager` (from
`dwarfgame.packed_array`), and per-archetype system lists are kept by
`ArchetypeManager` (from `dwarfgame.archetypes`). `EcsSystemHandler` drives
the systems in each layout.

## What it does not do

There are no enemies and no way to win or lose: health only goes up, and
fireballs fly until their time runs out without hitting anything. Walls are
drawn but do not block movement. Achievements are only printed, not saved.

## Running the tests

```
pip install ".[test]"
pytest
```