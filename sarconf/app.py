"""Command line front end: summarise a SAR configuration and draw its views."""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path

import matplotlib.style
from matplotlib.figure import Figure

from . import chronogram, geometry
from .config import SarConfig

_HELP = {
    "config_name": "name of the configuration",
    "bsar_config": "bistatic configuration",
    "elevation_aperture_angle": "antenna elevation aperture (°)",
    "azimuth_aperture_angle": "antenna azimuth aperture (°)",
    "carrier_velocity": "carrier velocity (m/s)",
    "carrier_height": "carrier height (m)",
    "look_angle": "look angle (°)",
    "pri": "pulse repetition interval (µs)",
    "tx_offset": "pulse offset (µs)",
    "tx_duration": "pulse duration (µs)",
    "nb_agilities": "number of frequency agilities",
    "nb_channels": "number of receive channels",
    "fech": "I/Q sampling frequency (MHz)",
    "rx_offset": "RX window offset (µs)",
    "rx_duration": "RX window duration (µs)",
    "rx_noise_offset": "noise window offset (µs)",
    "rx_noise_duration": "noise window duration (µs)",
    "rx_reinj_offset": "reinjection window offset (µs)",
    "rx_reinj_duration": "reinjection window duration (µs)",
    "peak_power": "peak power (W)",
    "loss_power": "power losses (dB)",
    "gain_antenna": "one-way antenna gain (dB)",
    "noise_factor": "receiver noise factor (dB)",
    "center_frequency": "center frequency (GHz)",
    "bandwidth": "bandwidth (MHz)",
    "retrodiff": "backscatter coefficient",
    "rx_gain": "receiver gain (dB)",
    "height_ambiguity": "height of ambiguity (m)",
    "accuracy_height_ambiguity": "height of ambiguity accuracy (m)",
}

_TYPES = {"str": str, "int": int, "float": float}


def _option(name: str) -> str:
    return "--" + name.replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one option per configuration parameter."""
    parser = argparse.ArgumentParser(
        prog="sarconf",
        description="Summarise a SAR configuration and draw its geometry and chronogram.",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="write the geometry and chronogram figure to this file",
    )
    for field in dataclasses.fields(SarConfig):
        type_name = field.type if isinstance(field.type, str) else field.type.__name__
        help_text = _HELP.get(field.name, field.name.replace("_", " "))
        if type_name == "bool":
            parser.add_argument(
                _option(field.name), dest=field.name, action="store_true",
                default=None, help=help_text,
            )
        else:
            parser.add_argument(
                _option(field.name), dest=field.name, type=_TYPES[type_name],
                default=None, help=f"{help_text} (default: {field.default})",
            )
    return parser


def config_from_args(args: argparse.Namespace) -> SarConfig:
    """Build a configuration from parsed arguments; unset options keep their defaults."""
    values = {
        field.name: getattr(args, field.name)
        for field in dataclasses.fields(SarConfig)
        if getattr(args, field.name, None) is not None
    }
    return SarConfig(**values)


def summary(config: SarConfig) -> str:
    """Human-readable digest of the derived quantities."""
    low, high = config.ground_illumination()
    lines = [
        f"Configuration: {config.config_name}",
        f"Height: {config.carrier_height:.3f} m ({config.height_ft():.3f} ft)",
        f"PRF: {config.prf():.1f} Hz",
        f"Final PRF: {config.final_prf():.1f} Hz",
        f"Radar-Target distance: {config.target_distance():.1f} m",
        f"Ground illumination: from {low:.1f} m to {high:.1f} m",
    ]
    return "\n".join(lines)


def render(config: SarConfig, path) -> Path:
    """Draw the geometry and the chronogram into an image file and return its path."""
    path = Path(path)
    with matplotlib.style.context("dark_background"):
        fig = Figure(figsize=(10, 8), layout="constrained")
        geometry_ax, chrono_ax = fig.subplots(2, 1, height_ratios=[3, 1])
        geometry_ax.set_title("Geometry")
        geometry.plot(
            geometry_ax,
            (0.0, config.carrier_height),
            config.look_angle,
            config.aperture_elevation_angles(),
            config.numerization_window(),
        )
        chrono_ax.set_title("Chronogram")
        chronogram.plot(chrono_ax, config.pri, config.chronogram_windows())
        fig.suptitle(config.config_name)
        fig.savefig(path)
    return path


def main(argv=None) -> int:
    """Print the configuration summary and optionally render its figure."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    print(summary(config))
    if args.output is not None:
        written = render(config, args.output)
        print(f"Figure written to {written}")
    return 0