"""Timing diagram of transmit and receive windows over successive PRIs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from matplotlib.ticker import FuncFormatter

_LINE_WIDTH = 2.0
_BASE_FILL_ALPHA = 0.6
_DASH = (0, (5, 5))


@dataclass
class Window:
    """A time window drawn as a rectangle on the chronogram (times in µs)."""

    name: str = "Untitled"
    start_time: float = 0.0
    duration: float = 1.0
    height: float = 1.0
    dashed: bool = False
    color: str | None = None

    def start(self) -> float:
        return self.start_time

    def end(self) -> float:
        return self.start_time + self.duration


@dataclass(frozen=True)
class Trace:
    """One drawn outline: a window repeated in a given ambiguity (PRI index)."""

    label: str
    points: tuple[tuple[float, float], ...]
    ambiguity: int
    alpha: float
    dashed: bool = False
    color: str | None = None


def _check_pri(pri: float) -> None:
    if not pri > 0:
        raise ValueError(f"PRI must be positive, got {pri!r}")


def ambiguity_count(pri: float, windows: Iterable[Window]) -> int:
    """Number of PRIs needed so that every window fits, plus one extra."""
    _check_pri(pri)
    count = 1
    for window in windows:
        end_time = window.end()
        if end_time > count * pri:
            count = math.ceil(end_time / pri) + 1
    return count


def _traces(pri: float, windows: Sequence[Window], count: int) -> Iterator[Trace]:
    for window in windows:
        for i in range(count):
            shift = pri * i
            start = shift + window.start()
            end = shift + window.end()
            yield Trace(
                label=f"{window.name} (Ambiguity {i})" if i > 0 else window.name,
                points=(
                    (start, 0.0),
                    (start, window.height),
                    (end, window.height),
                    (end, 0.0),
                ),
                ambiguity=i,
                alpha=_BASE_FILL_ALPHA / (i + 1),
                dashed=window.dashed,
                color=window.color,
            )


def traces(pri: float, windows: Iterable[Window]) -> list[Trace]:
    """Every window repeated once per ambiguity, window by window."""
    windows = list(windows)
    count = ambiguity_count(pri, windows)
    return list(_traces(pri, windows, count))


def plot(ax, pri: float, windows: Iterable[Window]):
    """Draw the chronogram on a matplotlib axes and return the axes."""
    windows = list(windows)
    count = ambiguity_count(pri, windows)
    horizon = count * pri

    xs = [horizon]
    for trace in _traces(pri, windows, count):
        x = [p[0] for p in trace.points]
        y = [p[1] for p in trace.points]
        xs.extend(x)
        (line,) = ax.plot(
            x,
            y,
            label=trace.label,
            linewidth=_LINE_WIDTH,
            linestyle=_DASH if trace.dashed else "-",
            color=trace.color,
        )
        ax.fill(x, y, color=line.get_color(), alpha=trace.alpha, linewidth=0)

    low = min(min(xs), 0.0) if not windows else min(xs)
    high = max(xs)
    if low == high:
        high = low + pri
    ax.set_xlim(low, high)
    ax.set_ylim(0.0, 1.1)
    ax.yaxis.set_visible(False)
    ax.grid(True, axis="x")
    ax.xaxis.set_major_formatter(FuncFormatter(lambda x, _pos: f"{x:.1f} µs"))
    if windows:
        ax.legend(loc="lower right")
    return ax