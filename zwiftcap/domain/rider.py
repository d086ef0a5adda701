"""
Normalized rider state.

A ``RiderState`` is a snapshot built from one decoded ``PlayerState``. Values
are converted to friendlier units but never range-checked: the upstream
telemetry is known to contain spikes (speeds near 1000 km/h, cadence over
150 rpm) and those are passed through unchanged.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any, Iterable, Optional

from zwiftcap.core.binary import low_bits, trunc_div


class PowerUp(IntEnum):
    FEATHER = 0
    DRAFT = 1
    AERO = 5
    NONE = 15


def position_m(raw_cm: int) -> float:
    return raw_cm / 100


def speed_from_raw(raw_speed: int) -> float:
    # mm/h -> m/s
    return raw_speed / 1000 / 3600


def cadence_rpm(cadence_uhz: int) -> int:
    return trunc_div(trunc_div(cadence_uhz, 1_000) * 6, 100)


def power_up_code(aux_flags: int) -> int:
    return low_bits(aux_flags, 4)


@dataclass(frozen=True)
class RiderState:
    """
    Attributes:
        id: Rider identifier.
        world_time: Simulation timestamp in milliseconds.
        group_id: Group or session identifier.
        x: Position in meters.
        y: Position in meters.
        heading: Orientation, raw units.
        lean: Lean angle, raw units.
        road_position: Position along the route, raw units.
        speed: Converted speed; noisy.
        distance: Cumulative distance in meters.
        climbing: Cumulative elevation gain in meters.
        time: Elapsed time in seconds.
        laps: Completed laps.
        cadence: Cadence in rpm.
        heartrate: Heart rate in bpm.
        power: Power in watts.
        power_up: Low nibble of the auxiliary flags, see ``PowerUp``.
        watching_rider_id: Rider currently being spectated.
    """
    id: int
    world_time: int
    group_id: int
    x: float
    y: float
    heading: int
    lean: int
    road_position: int
    speed: float
    distance: int
    climbing: int
    time: int
    laps: int
    cadence: int
    heartrate: int
    power: int
    power_up: int
    watching_rider_id: int

    @classmethod
    def from_player_state(cls, entry: Any) -> "RiderState":
        return cls(
            id=entry.id,
            world_time=entry.world_time,
            group_id=entry.group_id,
            x=position_m(entry.x),
            y=position_m(entry.y),
            heading=entry.heading,
            lean=entry.lean,
            road_position=entry.road_position,
            speed=speed_from_raw(entry.speed),
            distance=entry.distance,
            climbing=entry.climbing,
            time=entry.time,
            laps=entry.laps,
            cadence=cadence_rpm(entry.cadence_uhz),
            heartrate=entry.heartrate,
            power=entry.power,
            power_up=power_up_code(entry.aux_flags),
            watching_rider_id=entry.watching_rider_id,
        )

    @property
    def power_up_kind(self) -> Optional[PowerUp]:
        try:
            return PowerUp(self.power_up)
        except ValueError:
            return None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def normalize(entries: Iterable[Any]) -> list[RiderState]:
    return [RiderState.from_player_state(entry) for entry in entries]
