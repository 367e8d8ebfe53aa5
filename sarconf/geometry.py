"""Side view of the radar geometry: nadir, line of sight, beam and RX window."""

from __future__ import annotations

import math
from dataclasses import dataclass

from matplotlib.ticker import FuncFormatter

_ARC_STEPS = 100

Point = tuple[float, float]


@dataclass(frozen=True)
class GeometryLine:
    """A labelled polyline of the geometry view (coordinates in metres)."""

    label: str
    points: tuple[Point, ...]
    color: str
    dashed: bool = False
    width: float = 1.0


def arc_points(
    radius: float, start_angle_deg: float, end_angle_deg: float, center: Point
) -> list[Point]:
    """Points of an arc below the center, angles measured down from horizontal."""
    start = math.radians(start_angle_deg)
    span = math.radians(end_angle_deg - start_angle_deg)
    cx, cy = center
    points = []
    for step in range(_ARC_STEPS + 1):
        angle = start + step / _ARC_STEPS * span
        points.append((cx + radius * math.cos(angle), cy - radius * math.sin(angle)))
    return points


def arc_points_auto(radius: float, center: Point) -> list[Point]:
    """Quarter arc, cut where it meets the ground when the radius exceeds the height."""
    height = center[1]
    if radius <= height:
        end_angle_deg = 90.0
    else:
        end_angle_deg = 90.0 - math.degrees(math.acos(height / radius))
    return arc_points(radius, 0.0, end_angle_deg, center)


def _ground_hit(position: Point, angle_deg: float) -> Point:
    x, h = position
    return (x + h * math.tan(math.radians(angle_deg)), 0.0)


def geometry_lines(
    position: Point,
    look_angle_deg: float,
    aperture_angles_deg: tuple[float, float] | None = None,
    numerization_window: tuple[float, float] | None = None,
) -> list[GeometryLine]:
    """The lines making up the geometry view, in drawing order."""
    position = (float(position[0]), float(position[1]))
    lines = [
        GeometryLine("Nadir", ((0.0, 0.0), position), color="white", dashed=True),
        GeometryLine(
            "Radar-Target",
            (position, _ground_hit(position, look_angle_deg)),
            color="darkgreen",
        ),
    ]

    if aperture_angles_deg is not None:
        low, high = aperture_angles_deg
        lines.append(
            GeometryLine(
                "Beamwidth",
                (_ground_hit(position, low), position, _ground_hit(position, high)),
                color="blue",
            )
        )

    if numerization_window is not None:
        start, end = numerization_window
        if start < end:
            lines.append(
                GeometryLine(
                    "RX Window",
                    tuple(arc_points_auto(start, position)),
                    color="yellow",
                    width=2.0,
                )
            )
            lines.append(
                GeometryLine(
                    "RX Window",
                    tuple(arc_points_auto(end, position)),
                    color="yellow",
                    dashed=True,
                    width=2.0,
                )
            )
    return lines


def plot(
    ax,
    position: Point,
    look_angle_deg: float,
    aperture_angles_deg: tuple[float, float] | None = None,
    numerization_window: tuple[float, float] | None = None,
):
    """Draw the geometry view on a matplotlib axes and return the axes."""
    for line in geometry_lines(position, look_angle_deg, aperture_angles_deg, numerization_window):
        ax.plot(
            [p[0] for p in line.points],
            [p[1] for p in line.points],
            label=line.label,
            color=line.color,
            linestyle=(0, (5, 5)) if line.dashed else "-",
            linewidth=line.width,
        )
    ax.set_aspect("equal")
    ax.xaxis.set_major_formatter(FuncFormatter(lambda x, _pos: f"{x:.1f} m"))
    ax.yaxis.set_major_formatter(FuncFormatter(lambda y, _pos: f"{y:.1f} m"))
    ax.legend(loc="upper right")
    return ax