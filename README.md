# mobagen

Headless models for four small game-AI simulations: Conway's Game of Life,
step-by-step maze generation, flocking boids and hide-and-seek line of sight.
Each model keeps its state in plain Python objects. It moves forward only when
you call `step` or `update`. The package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To install the test requirements and run the tests:

```
pip install ".[test]"
pytest
```

## Game of Life

`mobagen.life_world.World` is a square board whose edges wrap around. It holds
a current buffer and a next buffer:

- `get` reads the current buffer.
- `set_current` and `set_next` write a cell. Coordinates wrap around the edges.
- `swap_buffers` makes the next buffer current.
- `randomize(rng=None)` fills both buffers with the same random cells.
- `alive_cells()` yields the coordinates of the live cells.

`mobagen.life_rules` provides the rules:

- `TileSet` has the members `NONE`, `SQUARE` and `HEXAGON`.
- `RuleBase` is the abstract base class.
- `JohnConway` uses eight neighbours on a square board.
- `HexagonGameOfLife` uses six neighbours. Its rows are shifted by half a cell
  when their distance from the middle row is odd.

Every rule provides `step(world)` and `count_neighbors(world, point)`.

`mobagen.life_manager.Manager` combines a world with both rules. It has these
methods:

- `step` advances the world by one generation.
- `update(delta_time)` steps once `time_between_steps` has passed, but only
  while `is_simulating` is true.
- `clear` stops the simulation and empties the board.
- `select_rule(index)` switches rule and clears the board.
- `resize(side_size)` accepts 5 to 256 and snaps the size to 4k+1.
- `randomize` fills the board at random.
- `toggle_cell(index)` flips a cell. It returns `False` if the cell lies
  outside the board.
- `mouse_position_to_index` and `cell_under` map a window point to a cell.

The rule selected at start is `HexagonGameOfLife`, which is index 0. Index 1
is `JohnConway`.

```python
from mobagen.life_manager import Manager

manager = Manager(13)
manager.select_rule(1)          # JohnConway
for cell in [(5, 6), (6, 6), (7, 6)]:
    manager.toggle_cell(cell)
manager.step()
print(sorted(manager.world.alive_cells()))   # [(6, 5), (6, 6), (6, 7)]
```

## Mazes

`mobagen.maze_node.Node` is a frozen dataclass that holds the `north`, `east`,
`south` and `west` walls of a cell. `to_bits` packs the four walls into an
integer and `from_bits` unpacks them.

`mobagen.maze_world.World(size=11, generators=None)` is a maze with an odd
number of cells per side. Cells are addressed from `-size // 2` to
`size // 2`. Neighbouring cells share their walls. The class has these
members:

- `get_node`, `set_node` and the `get_*` and `set_*` methods for each wall read
  and change walls.
- `get_node_color` and `set_node_color` read and change cell colours.
- `clear` raises every wall, resets the colours and resets the generators.
- `step` runs one move of the current generator and records `move_duration`
  and `total_time` in microseconds.
- `update(delta_time)` steps on a timer while `is_simulating` is true.
- `resize(size)` accepts 5 to 29 and snaps the size to 4k+1.
- `select_generator(index)` switches generator and clears the maze.

`mobagen.maze_generators` defines the abstract `MazeGenerator` and three
implementations: `PrimExample`, `RecursiveBacktrackerExample` and
`HuntAndKillExample`. Each takes an optional `random.Random`. Its `step(world)`
carves one move and returns `False` once the maze is finished. The module also
defines the `Color` named tuple.

## Flocking

`mobagen.flock_particle` provides two classes:

- `Vector2` is an immutable 2D vector with arithmetic and the methods
  `magnitude`, `normalized`, `rotate` and `distance_squared`.
- `Particle` accumulates forces with `apply_force`. Its `update` caps
  acceleration at `max_acceleration` and speed at `speed`, then moves the
  particle.

`mobagen.flock_rules` defines `FlockingRule` and six rules:

- `AlignmentRule`
- `CohesionRule`
- `SeparationRule`
- `MouseInfluenceRule`
- `BoundedAreaRule`
- `WindRule`

A rule computes its force with `compute_weighted_force`, which returns zero
when the rule is disabled, and caches the result in `force`. The rules read
`window_size`, `mouse_position` and `mouse_down` from their world.

`mobagen.flock_boid.Boid` is a particle with its own copies of the rules.
`compute_neighborhood` finds the other boids within `detection_radius`.

`mobagen.flock_world.World(window_size=(1280, 720), rng=None)` has these
methods:

- `start` builds the default rules and a flock of `nb_boids` boids.
- `update(delta_time)` steers the first boid by `input_arrow`, wraps boids that
  left the window to the opposite side, then moves every boid.
- Setters such as `set_number_of_boids`, `set_detection_radius` and
  `set_desired_speed` pass settings on to every boid.
- `restore_default_weights` puts the rule weights back to their starting
  values.

## Hide and seek

`mobagen.hideandseek` provides:

- `Grid` is a resizable grid of `Square` cells, indexed by `(column, line)`.
  Each square has a `type`, a `SquareType`, and a `visible` flag.
- `shadow_cast_grid_recursive` marks the squares of one `Octant` that can be
  seen from an origin, within a `Slope` range. Walls block the view.
- `Manager(side_size=17, rng=None)` puts the player in the centre and the enemy
  on a random square. It has these methods:
  - `click(index)` toggles a wall.
  - `drag(from_index, to_index)` moves the player or the enemy, or toggles a
    wall.
  - `enemy_tick` steps the enemy one square towards the player.
  - `shadow_cast` recomputes which squares the player can see.
  - `update(delta_time)` runs the enemy clock and refreshes visibility.

## What this package does not do

There is no window, rendering, GUI or mouse handling, and no command-line
program. Screen coordinates come in only as numbers passed to methods such as
`mouse_position_to_index`, `cell_under` and `screen_space_to_grid_index`.
Showing a model on screen and feeding it input is up to the caller.