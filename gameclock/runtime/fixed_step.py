"""Fixed-step timing parameters derived from the desired update rate."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_UPDATE_RATE = 60.0


@dataclass(frozen=True, slots=True)
class FixedStepParameters:
    """Physics delta and rate multiplier for one desired update rate.

    Instances are only built through `from_rate`, so the three derived values
    always agree with each other. `rate` must be > 0; this is not checked.
    """

    rate: float
    physics_elapsed_seconds: float
    physics_elapsed_ms: float
    update_rate_multiplier: float

    @classmethod
    def from_rate(cls, rate: float) -> FixedStepParameters:
        physics_elapsed_seconds = 1.0 / rate
        return cls(
            rate=rate,
            physics_elapsed_seconds=physics_elapsed_seconds,
            physics_elapsed_ms=physics_elapsed_seconds * 1000.0,
            update_rate_multiplier=1.0 / rate,
        )
