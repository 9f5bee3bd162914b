# portfolio

A set of small, self-contained simulations in pure Python. The package has
no runtime dependencies.

- **Reentry** (`portfolio.reentry`): a capsule falling back to Earth under
  gravity and atmospheric drag, with a layered atmosphere model
  (`atmospheric_density`), `drag_acceleration`, `gravitational_acceleration`,
  a stepping `Capsule` and a chase camera (`camera_focus`).
- **Waveform** (`portfolio.waveform`): a golden-angle disc of particles
  (`particle_positions`) lifted onto a radial sine wave (`wave_height`,
  `animate`), with settings changed through `WaveformModification` requests.
- **Timeline and scrolling** (`portfolio.timeline`, `portfolio.scroll`,
  `portfolio.translation`): the arithmetic behind a scroll-driven page:
  which `Timeline` section is active, how far a scroll animation has
  progressed, where the side navigation's dots sit, and an eased
  back-and-forth motion (`translate_object`).
- **Page animations** (`portfolio.pages`): slide-in styles
  (`about_styles`), the fly-in of skill labels (`skill_transforms`) and a
  `PhotoCarousel`.
- **Galaga** (`portfolio.galaga`): a headless space shooter. `components`
  holds entities, motion and collision handling; `game` holds the `Game`
  loop with ship controls, asteroid spawning, despawning and game states.
- **3D math** (`portfolio.transform`): `Vec3`, `Quat`, `Transform` and
  spinning `Rotatable` objects, used by the modules above.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The reentry simulation can be run from the shell. It steps the capsule from
its starting orbit and prints its altitude and speed at each step until it
reaches the ground:

```
portfolio-reentry
```

Options:

- `--dt SECONDS`: time step (default `0.1`; must be positive).
- `--steps N`: stop after this many steps instead of running to the ground.

```
portfolio-reentry --dt 1.0 --steps 100
```

## Library use

Eased motion between two limits:

```python
from portfolio.translation import TranslationConfig, TranslationState, translate_object

state = TranslationState(position=0.0, velocity=0.0, moving_up=True)
config = TranslationConfig(target_speed=0.5, easing_factor=0.1, max_translation=10.0, threshold=0.1)
for _ in range(100):
    translate_object(state, config)
print(state.position)
```

Which timeline section is on screen:

```python
from portfolio.timeline import active_timestep

section = active_timestep(scroll_top=1500.0, viewport_height=1000.0)
print(section.label())  # "About Me"
```

Air density along the way down:

```python
from portfolio.reentry import atmospheric_density

for altitude in (0.0, 11_000.0, 25_000.0, 90_000.0):
    print(altitude, atmospheric_density(altitude))
```

Stepping the capsule directly:

```python
from portfolio.reentry import Capsule

capsule = Capsule()
state = capsule.step(0.5)
print(state.altitude, state.velocity)
```

Driving the game one frame at a time:

```python
from portfolio.galaga.game import Game, Key

game = Game()
game.update(1 / 60, pressed={Key.SHIFT_LEFT}, just_pressed=set())
print(game.spaceship())
```

## What it does not do

Nothing here draws anything. There is no web page, window, 3D view or
keyboard handling: the page modules compute positions, indices and inline
style strings, and the game and simulations advance their state only when
called. Feeding them real input and displaying the results is left to the
caller.