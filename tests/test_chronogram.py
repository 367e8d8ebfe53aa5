import pytest
from matplotlib.figure import Figure

from sarconf.chronogram import Trace, Window, ambiguity_count, plot, traces


def _axes():
    return Figure().add_subplot()


def test_window_defaults():
    w = Window()
    assert w.name == "Untitled"
    assert w.start() == 0.0
    assert w.end() == 1.0
    assert w.height == 1.0
    assert w.dashed is False
    assert w.color is None


def test_window_end_is_start_plus_duration():
    w = Window(start_time=2.5, duration=7.25)
    assert w.end() == w.start() + w.duration
    assert w.start() == 2.5


def test_ambiguity_count_empty_is_one():
    assert ambiguity_count(100.0, []) == 1


def test_ambiguity_count_window_within_first_pri():
    assert ambiguity_count(100.0, [Window(start_time=0.0, duration=10.0)]) == 1


def test_ambiguity_count_pinned_value():
    assert ambiguity_count(100.0, [Window(start_time=100.0, duration=50.0)]) == 3


@pytest.mark.parametrize("end", [10.0, 99.0, 101.0, 250.0, 999.5])
def test_ambiguity_count_covers_all_windows(end):
    pri = 100.0
    windows = [Window(start_time=0.0, duration=end), Window(start_time=1.0, duration=2.0)]
    count = ambiguity_count(pri, windows)
    assert all(w.end() <= count * pri for w in windows)


@pytest.mark.parametrize("pri", [0.0, -5.0])
def test_ambiguity_count_rejects_non_positive_pri(pri):
    with pytest.raises(ValueError):
        ambiguity_count(pri, [Window()])


def test_traces_count_and_order():
    pri = 100.0
    windows = [Window(name="TX", duration=10.0), Window(name="RX", start_time=24.0, duration=150.0)]
    result = traces(pri, windows)
    count = ambiguity_count(pri, windows)
    assert len(result) == count * len(windows)
    assert all(isinstance(t, Trace) for t in result)
    assert [t.ambiguity for t in result[:count]] == list(range(count))
    assert result[0].label == "TX"
    assert result[1].label == "TX (Ambiguity 1)"
    assert result[count].label == "RX"


def test_traces_are_shifted_by_pri():
    pri = 100.0
    window = Window(name="RX", start_time=24.0, duration=150.0, height=0.8)
    result = traces(pri, [window])
    base = result[0].points
    for trace in result:
        for (x, y), (bx, by) in zip(trace.points, base):
            assert x == pytest.approx(bx + pri * trace.ambiguity)
            assert y == by


def test_trace_outline_shape():
    window = Window(start_time=5.0, duration=3.0, height=0.2)
    (trace,) = traces(100.0, [window])
    assert trace.points == (
        (window.start(), 0.0),
        (window.start(), window.height),
        (window.end(), window.height),
        (window.end(), 0.0),
    )


def test_trace_alpha_decreases_and_starts_at_base():
    result = traces(100.0, [Window(start_time=0.0, duration=350.0)])
    alphas = [t.alpha for t in result]
    assert alphas[0] == pytest.approx(0.6)
    assert alphas == sorted(alphas, reverse=True)
    assert len(set(alphas)) == len(alphas)


def test_traces_carry_style():
    window = Window(name="Nadir", dashed=True, color="white")
    result = traces(100.0, [window])
    assert all(t.dashed for t in result)
    assert all(t.color == "white" for t in result)


def test_plot_draws_legend_and_limits():
    pri = 100.0
    windows = [Window(name="TX", duration=10.0, color="red"), Window(name="RX", start_time=24.0, duration=150.0)]
    ax = _axes()
    returned = plot(ax, pri, windows)
    assert returned is ax
    count = ambiguity_count(pri, windows)
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert labels == [t.label for t in traces(pri, windows)]
    assert ax.get_xlim()[1] >= count * pri
    assert ax.get_ylim() == pytest.approx((0.0, 1.1))
    assert len(ax.get_lines()) == count * len(windows)


def test_plot_axis_formatter_uses_microseconds():
    ax = _axes()
    plot(ax, 100.0, [Window()])
    text = ax.xaxis.get_major_formatter()(12.0, 0)
    assert text.endswith(" µs")
    assert ax.yaxis.get_visible() is False


def test_plot_dashed_window_uses_dashed_line():
    ax = _axes()
    plot(ax, 100.0, [Window(name="Nadir", dashed=True)])
    assert all(line.get_linestyle() != "-" for line in ax.get_lines())
    assert ax.get_lines()[0].get_label() == "Nadir"