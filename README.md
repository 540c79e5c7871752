# orrery

A small, interactive model of the solar system. The Sun and the eight planets
start at perihelion on Keplerian orbits and then move under their mutual
gravity. The simulation steps them forward with velocity Verlet integration.
The Sun is given a starting velocity that makes the system's total momentum zero.

The simulation uses its own units. The gravitational constant, the Sun's mass
and the astronomical unit are all 1. One time unit, a "blip", is about 58 days,
so Earth completes an orbit in 2π blips. Each frame advances the simulation by
`orrery.orbits.TIMESTEP` (0.01 blips).

## Installing

```
pip install .
```

This installs `pygame` and an `orrery` command. To run the tests:

```
pip install .[test]
pytest
```

## Running

```
orrery [--assets DIR] [--frames N]
```

- `--assets DIR` is the asset directory. The default is `../assets`, relative
  to the working directory.
- `--frames N` stops after N frames. The default is 0, which runs until the
  window is closed. N cannot be negative.

The asset directory must hold these files:

- `quotes.txt`: one quote per line. Empty lines are skipped. If the file is
  missing, the loading screen shows `Loading...`.
- `fonts/GrenzeGotisch-Regular.ttf`: the loading-screen font. The command
  exits with status 1 if it cannot load this font.
- `fonts/SpaceMono-Regular.ttf`, `fonts/Gugi-Regular.ttf` and
  `fonts/ChakraPetch-Regular.ttf`: the sidebar fonts. If one is missing,
  pygame's default font is used in its place.
- `sprites/bg.png`: the background. The command exits with status 1 if it
  cannot load this image.
- `sprites/<name>.png` for each body (`sun.png`, `mercury.png`, … `neptune.png`).
  A body whose texture is missing is drawn as a magenta disc.

The window is 1920×1080. It first shows a loading screen with a random quote,
which fades in from black. Press any key or click to start the simulation.
Once it is running:

- scroll the mouse wheel to zoom in (×1.05) or out (×0.95);
- hold the right mouse button and drag to pan;
- left-click a body to select it. A click on empty space clears the selection.

While a body is selected, its orbit trail is drawn. A sidebar lists the body's
name and description, its position, distance from the Sun, orbital speed and
period, orbital phase, orbits completed, eccentricity and angular momentum.
It also shows the body's acceleration, centripetal force, mass, surface
temperature, rotational period, surface gravity and escape velocity, its
kinetic, potential and total energy, its number of moons and its nicknames.
Earth is selected when the simulation starts.

## Using the library

The physics modules do not need a display and can be driven directly:

```python
from orrery.simulation import Simulation

sim = Simulation()          # the Sun followed by the eight planets
for _ in range(1000):
    sim.update(0.01)

sun, earth = sim.bodies[0], sim.bodies[3]
print(earth.name, earth.position, earth.orbits_completed)
print(earth.kinetic_energy() + earth.potential_energy(sun))
```

`Simulation(bodies)` also accepts any iterable of bodies. The first body is
the reference for the orbital phase and for counting orbits. A body named
`"Sun"` gets no phase and no orbit count.

Useful pieces:

- `orrery.vector.Vector2D`: an immutable 2-D vector with arithmetic, `dot`,
  `cross`, `magnitude`, `normalized`, `angle_between` and `as_tuple`.
  Dividing by zero leaves the vector unchanged.
- `orrery.orbits`: the unit constants and planetary data. It also has
  `perihelion_state(semi_major_axis, eccentricity)`, which gives the position
  and velocity at perihelion around a unit mass at the origin. It raises
  `ValueError` for orbits that have no real perihelion speed.
- `orrery.simulation.create_solar_system()`: gives the list of nine bodies.
- `orrery.body.Body`: a celestial body. It computes its gravitational force
  (softened below a squared distance of 0.01), kinetic and potential energy,
  angular momentum, orbital period, surface gravity and escape velocity. It
  can also test for overlap with another body and for visibility in a view.
- `orrery.physics.calculate_forces(bodies)`: sets each body's acceleration from
  pairwise gravity.
- `orrery.orbit_trail.OrbitTrail`: a ring of up to 942 recent positions, spaced
  at least a minimum distance apart. `segments()` returns the line strips to draw.
- `orrery.camera.Camera`: pan and zoom, with the conversion from screen to world.
- `orrery.selection.SelectionManager`: holds the selected body.
- `orrery.quotes.QuoteManager`: picks random lines from a quotes file.
- `orrery.sidebar.format_body_info(body, sun)`: gives the text lines that the
  sidebar shows.
- `orrery.ui` (`Label`, `Panel`, `UIManager`), `orrery.renderer` (`AssetManager`,
  `Renderer`) and `orrery.input_handler.InputHandler`: the pygame drawing and
  input layers that the `orrery` command uses.

## What it does not do

- No fonts, sprites or quotes come with the package. They must be supplied in
  the asset directory.
- Bodies pass through one another. `Body.is_colliding` reports an overlap, but
  nothing merges or bounces the bodies.
- There is no pause, time-speed control or keyboard control of the camera.
  There is also no way to save or load a simulation state.