"""SAR acquisition parameters and the quantities derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .chronogram import Window

SPEED_OF_LIGHT = 299_792_458.0  # m/s
FEET_PER_METRE = 1 / 0.3048


@dataclass
class SarConfig:
    """Transmitter, receiver and geometry settings of a SAR configuration.

    Times are in µs, heights and distances in metres, angles in degrees.
    """

    config_name: str = "Untitled"
    bsar_config: bool = False

    # Antenna
    elevation_aperture_angle: float = 18.0
    azimuth_aperture_angle: float = 0.0

    # Geometry
    carrier_velocity: float = 120.0
    carrier_height: float = 3000.0
    look_angle: float = 45.0

    # Transmission
    pri: float = 100.0
    tx_offset: float = 0.0
    tx_duration: float = 10.0
    nb_agilities: int = 1

    # Receiver
    nb_channels: int = 1
    fech: float = 0.0
    rx_offset: float = 24.0
    rx_duration: float = 21.0
    rx_noise_offset: float = 15.0
    rx_noise_duration: float = 3.0
    rx_reinj_offset: float = 20.0
    rx_reinj_duration: float = 3.0

    # Sensitivity
    peak_power: float = 0.0
    loss_power: float = 0.0
    gain_antenna: float = 0.0
    noise_factor: float = 0.0
    center_frequency: float = 0.0
    bandwidth: float = 0.0

    # Level
    retrodiff: float = 0.0
    rx_gain: float = 0.0

    # Interference
    height_ambiguity: float = 0.0
    accuracy_height_ambiguity: float = 0.0

    _NON_NEGATIVE = (
        "carrier_velocity",
        "carrier_height",
        "tx_offset",
        "tx_duration",
        "fech",
        "rx_offset",
        "rx_duration",
        "rx_noise_offset",
        "rx_noise_duration",
        "rx_reinj_offset",
        "rx_reinj_duration",
        "peak_power",
        "loss_power",
        "gain_antenna",
        "noise_factor",
        "center_frequency",
        "bandwidth",
    )

    def __post_init__(self) -> None:
        for name in self._NON_NEGATIVE:
            value = getattr(self, name)
            if not value >= 0:
                raise ValueError(f"{name} must not be negative, got {value!r}")
        if not self.pri >= 1:
            raise ValueError(f"pri must be at least 1 µs, got {self.pri!r}")
        for name in ("nb_agilities", "nb_channels"):
            value = getattr(self, name)
            if int(value) != value or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not 0.0 <= self.look_angle <= 90.0:
            raise ValueError(f"look_angle must lie in [0, 90], got {self.look_angle!r}")
        for name in ("elevation_aperture_angle", "azimuth_aperture_angle"):
            value = getattr(self, name)
            if not 0.0 <= value <= 360.0:
                raise ValueError(f"{name} must lie in [0, 360], got {value!r}")

    def height_ft(self) -> float:
        """Carrier height in feet."""
        return self.carrier_height * FEET_PER_METRE

    def prf(self) -> float:
        """Pulse repetition frequency in Hz."""
        return 1e6 / self.pri

    def final_prf(self) -> float:
        """PRF per frequency agility, in Hz."""
        return self.prf() / self.nb_agilities

    def chronogram_windows(self) -> list[Window]:
        """The TX, nadir echo and RX windows shown on the chronogram."""
        nadir_delay = self.carrier_height / SPEED_OF_LIGHT * 2e6
        windows = [
            Window("TX", self.tx_offset, self.tx_duration, 1.0, False, "red"),
            Window("Nadir", self.tx_offset + nadir_delay, self.tx_duration, 0.2, True, "white"),
            Window("RX", self.rx_offset, self.rx_duration, 1.0, False, "lightyellow"),
            Window("Noise", self.rx_noise_offset, self.rx_noise_duration, 0.8, False, "gold"),
            Window("Reinj", self.rx_reinj_offset, self.rx_reinj_duration, 0.8, False, "gold"),
        ]
        full_resolution = self.rx_duration - self.tx_offset - self.tx_duration
        if full_resolution > 0.0:
            windows.append(
                Window("RX (full resol)", self.rx_offset, full_resolution, 1.0, True, "yellow")
            )
        return windows

    def aperture_elevation_angles(self) -> tuple[float, float]:
        """Lower and upper elevation edges of the antenna beam, in degrees."""
        half = self.elevation_aperture_angle / 2.0
        return (self.look_angle - half, self.look_angle + half)

    def numerization_window(self) -> tuple[float, float]:
        """Slant ranges (m) at which digitisation starts and full resolution ends."""
        start = 0.5e-6 * SPEED_OF_LIGHT * self.rx_offset
        end = 0.5e-6 * SPEED_OF_LIGHT * (
            self.rx_offset + self.rx_duration - self.tx_offset - self.tx_duration
        )
        return (start, end)

    def target_distance(self) -> float:
        """Slant range from the radar to the target along the look angle, in metres."""
        return self.carrier_height / math.cos(math.radians(self.look_angle))

    def ground_illumination(self) -> tuple[float, float]:
        """Ground distances (m) from nadir covered by the elevation beam."""
        low, high = self.aperture_elevation_angles()
        return (
            self.carrier_height * math.tan(math.radians(low)),
            self.carrier_height * math.tan(math.radians(high)),
        )