# sarconf

A small planner for airborne synthetic-aperture radar (SAR) configurations.
Given the carrier height, look angle, antenna aperture, pulse repetition
interval and the transmit/receive timing, it works out the derived figures
(PRF, final PRF with frequency agilities, radar-target distance, illuminated
ground swath) and draws two plots:

- a **chronogram** of the TX pulse, the nadir echo, the RX, noise and
  reinjection windows (plus the full-resolution part of the RX window when
  there is one), repeated over every PRI ambiguity that they reach;
- a **geometry** view of the carrier above the ground, the nadir, the line of
  sight to the target, the elevation beamwidth and the arcs bounding the
  receive (numerization) window.

Times are in microseconds, distances in metres and angles in degrees.

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

```
sarconf --help
```

lists every configuration parameter as an option: the field names of
`SarConfig` with dashes, such as `--carrier-height`, `--look-angle`, `--pri`,
`--rx-offset` or `--nb-agilities`, and the flag `--bsar-config`. Options that
are not given keep their defaults. Running `sarconf` alone prints a summary of
the default configuration:

```
sarconf --carrier-height 4000 --look-angle 60
```

With `-o`/`--output FILE` the geometry view and the chronogram are also drawn
into one image file (dark background), whose format follows the file
extension:

```
sarconf --pri 80 -o sarconf.png
```

Values outside their allowed range (negative times or powers, a PRI below
1 µs, a look angle outside 0–90°, apertures outside 0–360°, agility or channel
counts below 1) are reported as a usage error.

## Library use

```python
from sarconf.config import SarConfig
from sarconf.app import summary, render

config = SarConfig(carrier_height=3000.0, look_angle=45.0)
print(config.prf())                 # Hz, from the PRI
print(config.final_prf())           # Hz, PRF divided by the number of agilities
print(config.height_ft())           # carrier height in feet
print(config.target_distance())     # m, carrier to target along the look angle
print(config.ground_illumination()) # m, near and far edge of the beam on the ground
print(config.numerization_window()) # m, slant ranges of the RX window

print(summary(config))
render(config, "sarconf.png")
```

`SarConfig` raises `ValueError` for out-of-range values.
`SarConfig.chronogram_windows()` gives the `chronogram.Window` list that the
chronogram is drawn from.

The plotting pieces can be used on their own with any matplotlib axes:

```python
import matplotlib.pyplot as plt
from sarconf import chronogram, geometry

fig, (top, bottom) = plt.subplots(2, 1)
chronogram.plot(top, 100.0, [chronogram.Window(name="TX", start_time=0.0, duration=10.0)])
geometry.plot(bottom, (0.0, 3000.0), 45.0, (36.0, 54.0), (3600.0, 5200.0))
fig.savefig("plots.png")
```

`chronogram.ambiguity_count` and `chronogram.traces` give the ambiguity count
and the traced outlines (`chronogram.Trace`) without drawing anything; both
raise `ValueError` when the PRI is not positive. `geometry.geometry_lines`
does the same for the geometry view, returning `geometry.GeometryLine`
objects, and `geometry.arc_points` / `geometry.arc_points_auto` compute the
range arcs.

## What it does not do

- There is no interactive window: parameters are set on the command line or
  in code, and the plots are written to image files.
- Configurations cannot be saved to or loaded from files; there is no import
  or export format.
- The sensitivity, level and interference parameters (peak power, losses,
  antenna gain, noise factor, center frequency, bandwidth, backscatter, RX
  gain, height of ambiguity) are accepted and checked but not used in any
  computation. The bistatic flag, azimuth aperture, carrier velocity, sampling
  frequency and channel count are likewise only stored.