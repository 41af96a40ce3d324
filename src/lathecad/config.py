"""Default revolve settings and YAML configuration loading.

A settings file is a YAML mapping, either flat or nested under a
``revolve:`` key::

    revolve:
      segments: 36
      angle: 180
      tolerance: 0.0001
      key_precision: 4
      weld_precision: 6
      cap_style: earcut
      orientation: solid

``orientation`` is ``radial`` (each chain faces away from the axis at its
first off-axis segment) or ``solid`` (closed profiles become outward
facing solids).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from lathecad.caps import CAP_STYLES
from lathecad.errors import InvalidParameters
from lathecad.geom import KEY_PRECISION, TOLERANCE
from lathecad.params import DEFAULT_SEGMENTS, clamp_segments
from lathecad.winding import ORIENTATIONS


@dataclass(frozen=True)
class RevolveSettings:
    segments: int = DEFAULT_SEGMENTS
    angle: float = 360.0
    tolerance: float = TOLERANCE
    key_precision: int = KEY_PRECISION
    weld_precision: int = 6
    cap_style: str = 'fan'
    orientation: str = 'radial'

    def __post_init__(self):
        if not (0.0 < float(self.angle) <= 360.0):
            raise InvalidParameters(f'angle must be in (0, 360], got {self.angle}')
        if float(self.tolerance) <= 0.0:
            raise InvalidParameters(f'tolerance must be positive, got {self.tolerance}')
        if int(self.key_precision) < 0 or int(self.weld_precision) < 0:
            raise InvalidParameters('precisions must be non-negative')
        if self.cap_style not in CAP_STYLES:
            raise InvalidParameters(f'cap_style must be one of {CAP_STYLES}, got {self.cap_style!r}')
        if self.orientation not in ORIENTATIONS:
            raise InvalidParameters(f'orientation must be one of {ORIENTATIONS}, '
                                    f'got {self.orientation!r}')
        object.__setattr__(self, 'segments', clamp_segments(self.segments))
        object.__setattr__(self, 'angle', float(self.angle))
        object.__setattr__(self, 'tolerance', float(self.tolerance))
        object.__setattr__(self, 'key_precision', int(self.key_precision))
        object.__setattr__(self, 'weld_precision', int(self.weld_precision))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RevolveSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameters(f'unknown settings: {", ".join(unknown)}')
        try:
            return cls(**dict(data))
        except (TypeError, ValueError) as exc:
            raise InvalidParameters(f'bad settings value: {exc}') from exc

    def updated(self, **overrides: Any) -> "RevolveSettings":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings(path: Path | str) -> RevolveSettings:
    """Read settings from a YAML file.  An empty file yields defaults."""

    path = Path(path)
    with path.open('r', encoding='utf-8') as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise InvalidParameters(f'cannot parse {path}: {exc}') from exc
    if not isinstance(data, dict):
        raise InvalidParameters(f'{path} must contain a mapping')
    if 'revolve' in data:
        data = data['revolve'] or {}
        if not isinstance(data, dict):
            raise InvalidParameters(f"'revolve' section of {path} must be a mapping")
    return RevolveSettings.from_mapping(data)


def save_settings(settings: RevolveSettings, path: Path | str) -> Path:
    path = Path(path)
    with path.open('w', encoding='utf-8') as fp:
        yaml.safe_dump({'revolve': settings.to_dict()}, fp, sort_keys=False)
    return path


__all__ = ['RevolveSettings', 'load_settings', 'save_settings']
