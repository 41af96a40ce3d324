"""Command-line front end: revolve a profile file into an STL.

Usage::

    python -m lathecad PROFILE --axis-start X,Y,Z --axis-end X,Y,Z \\
        [--angle DEG] [--segments N] [--value TEXT ...] \\
        [--cap-style fan|earcut] [--orientation radial|solid] \\
        [--config settings.yaml] \\
        [--ascii] [-o OUT.stl] [--check] [-v]

``PROFILE`` is a ``.dxf`` drawing or a ``.json`` edge list.  ``--value``
accepts the same typed values as the interactive tool: ``36s`` sets the
segment count and a bare number sets the angle.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ezdxf.lldxf.const import DXFError

from lathecad.caps import CAP_STYLES
from lathecad.config import RevolveSettings, load_settings
from lathecad.errors import InvalidParameters, RevolveError
from lathecad.geom import KEY_PRECISION
from lathecad.geometry_checks import (
    faces_consistent,
    faces_outward,
    mesh_watertight,
    no_degenerate_triangles,
)
from lathecad.io.dxf import read_profile_edges
from lathecad.io.profile_json import load_edges
from lathecad.io.stl import write_stl
from lathecad.logging_config import setup_logging
from lathecad.params import RevolveParams, parse_user_text
from lathecad.revolve import revolve_profile
from lathecad.winding import ORIENTATIONS

logger = logging.getLogger(__name__)


def parse_point(text: str) -> Tuple[float, float, float]:
    parts = [p for p in text.replace(' ', '').split(',') if p]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f'expected X,Y,Z but got {text!r}')
    try:
        return float(parts[0]), float(parts[1]), float(parts[2])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f'bad coordinate in {text!r}') from exc


def load_profile(path: Path, precision: int = KEY_PRECISION):
    suffix = path.suffix.lower()
    if suffix == '.dxf':
        try:
            return read_profile_edges(path, precision=precision)
        except (OSError, DXFError) as exc:
            raise InvalidParameters(f'cannot read profile {path}: {exc}') from exc
    if suffix == '.json':
        try:
            return load_edges(path, precision=precision)
        except ValueError as exc:
            raise InvalidParameters(f'cannot read profile {path}: {exc}') from exc
    raise InvalidParameters(f'unsupported profile format: {path.suffix or path.name}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lathecad',
        description='Revolve a 2D-ish profile around an axis into a triangle mesh.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('profile', type=Path, help='profile edges (.dxf or .json)')
    parser.add_argument('--axis-start', type=parse_point, required=True,
                        help='first axis point, X,Y,Z')
    parser.add_argument('--axis-end', type=parse_point, required=True,
                        help='second axis point, X,Y,Z (right-hand rule sets the sweep sense)')
    parser.add_argument('--angle', type=float, help='sweep angle in degrees (0, 360]')
    parser.add_argument('--segments', type=int, help='number of angular segments [3, 360]')
    parser.add_argument('--value', action='append', default=[], metavar='TEXT',
                        help='typed value such as "36s" (segments) or "180" (angle); repeatable')
    parser.add_argument('--cap-style', choices=CAP_STYLES, help='end cap triangulation')
    parser.add_argument('--orientation', choices=ORIENTATIONS,
                        help='face orientation rule; "solid" makes closed profiles face outward')
    parser.add_argument('--config', type=Path, help='YAML settings file')
    parser.add_argument('-o', '--output', type=Path, help='output STL (default: PROFILE.stl)')
    parser.add_argument('--ascii', action='store_true', help='write ASCII instead of binary STL')
    parser.add_argument('--check', action='store_true',
                        help='report degenerate, inconsistent and open-boundary faces; '
                             'with --orientation solid also inward faces')
    parser.add_argument('--log-file', help='also write the log to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def resolve_settings(args: argparse.Namespace) -> RevolveSettings:
    settings = load_settings(args.config) if args.config else RevolveSettings()
    settings = settings.updated(angle=args.angle, segments=args.segments,
                                cap_style=args.cap_style, orientation=args.orientation)
    segments, angle = settings.segments, settings.angle
    for text in args.value:
        segments, angle = parse_user_text(text, segments, angle)
        logger.debug("after value %r: %d segments, %.6g degrees", text, segments, angle)
    return settings.updated(segments=segments, angle=angle)


def run_checks(mesh, precision: int = 6, solid: bool = False) -> List[str]:
    checks = [('degenerate', no_degenerate_triangles(mesh, mesh.tol)),
              ('orientation', faces_consistent(mesh, precision)),
              ('watertight', mesh_watertight(mesh, precision))]
    # an open surface has no inside
    if solid and checks[-1][1]:
        checks.append(('outward', faces_outward(mesh)))

    lines = []
    for name, check in checks:
        status = 'ok' if check else 'FAIL'
        detail = '; '.join(check.warnings)
        lines.append(f'{name}: {status}' + (f' ({detail})' if detail else ''))
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    if not args.profile.exists():
        parser.error(f'profile not found: {args.profile}')

    output = args.output or args.profile.with_suffix('.stl')

    try:
        settings = resolve_settings(args)
        edges = load_profile(args.profile, settings.key_precision)
        params = RevolveParams.from_points(args.axis_start, args.axis_end,
                                           settings.angle, settings.segments)
        mesh = revolve_profile(edges, params, settings)
    except RevolveError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1

    count = write_stl(mesh, output, binary=not args.ascii, name=args.profile.stem)
    print(f'{output}: {count} triangles')

    if args.check:
        report = run_checks(mesh, settings.weld_precision, settings.orientation == 'solid')
        for line in report:
            print(line)
        if any(': FAIL' in line for line in report):
            return 2
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
