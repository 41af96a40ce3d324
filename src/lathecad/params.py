"""Sweep parameters for a revolve."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Tuple

from lathecad.errors import InvalidParameters
from lathecad.geom import TOLERANCE, Axis, dist, to_vec3

DEFAULT_SEGMENTS = 24
MIN_SEGMENTS = 3
MAX_SEGMENTS = 360
FULL_REVOLUTION_TOL = 0.001  # radians

_SEGMENTS_RE = re.compile(r'^(\d+)s$', re.IGNORECASE)
_ANGLE_RE = re.compile(r'^(\d+\.?\d*)$')


def clamp_segments(segments: int) -> int:
    return max(MIN_SEGMENTS, min(MAX_SEGMENTS, int(segments)))


def is_full_revolution(angle: float) -> bool:
    """True if ``angle`` degrees is a full turn within 0.001 rad."""
    return abs(math.radians(angle) - 2.0 * math.pi) < FULL_REVOLUTION_TOL


@dataclass(frozen=True)
class RevolveParams:
    """Axis, sweep angle in degrees and segment count.

    The segment count is clamped to ``[3, 360]``.  An angle outside
    ``(0, 360]`` raises ``InvalidParameters``.
    """

    axis: Axis
    angle: float = 360.0
    segments: int = DEFAULT_SEGMENTS

    def __post_init__(self):
        angle = float(self.angle)
        if not (0.0 < angle <= 360.0) and not is_full_revolution(angle):
            raise InvalidParameters(f'sweep angle must be in (0, 360] degrees, got {self.angle}')
        object.__setattr__(self, 'angle', min(angle, 360.0))
        object.__setattr__(self, 'segments', clamp_segments(self.segments))

    @classmethod
    def from_points(cls, axis_start, axis_end, angle: float = 360.0,
                    segments: int = DEFAULT_SEGMENTS) -> "RevolveParams":
        """Build parameters from two picked axis points.

        The points must be more than the geometric tolerance apart; the
        rotation sense follows the right-hand rule about start -> end.
        """

        if dist(to_vec3(axis_start), to_vec3(axis_end)) <= TOLERANCE:
            raise InvalidParameters('axis start and end points must be different')
        return cls(Axis.from_points(axis_start, axis_end), angle, segments)

    @property
    def full(self) -> bool:
        return is_full_revolution(self.angle)

    @property
    def step_count(self) -> int:
        """Number of rotated profiles: wraps on a full turn."""
        return self.segments if self.full else self.segments + 1

    @property
    def angle_step(self) -> float:
        return self.angle / self.segments


def parse_user_text(text: str, segments: int, angle: float) -> Tuple[int, float]:
    """Apply a typed value to ``(segments, angle)``.

    ``"36s"`` sets the segment count (clamped), a bare number sets the
    angle in degrees if it lies in ``(0, 360]``.  Anything else leaves
    both values unchanged.
    """

    text = text.strip()
    m = _SEGMENTS_RE.match(text)
    if m:
        return clamp_segments(int(m.group(1))), angle
    m = _ANGLE_RE.match(text)
    if m:
        value = float(m.group(1))
        if 0.0 < value <= 360.0:
            return segments, value
    return segments, angle


__all__ = [
    'DEFAULT_SEGMENTS',
    'MIN_SEGMENTS',
    'MAX_SEGMENTS',
    'clamp_segments',
    'is_full_revolution',
    'RevolveParams',
    'parse_user_text',
]
