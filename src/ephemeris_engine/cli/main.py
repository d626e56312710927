"""CLI entry point: ephemeris-engine calc|event subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import cast

from ephemeris_engine.constants import (
    AST_OFFSET,
    BACKEND_JPL,
    BACKEND_SERIES,
    BACKEND_SPK,
    BACKEND_SWEPH,
    BIT_DISC_BOTTOM,
    BIT_DISC_CENTER,
    BIT_NO_REFRACTION,
    BODY_NAMES,
    FLG_BARYCTR,
    FLG_EQUATORIAL,
    FLG_HELCTR,
    FLG_ICRS,
    FLG_J2000,
    FLG_NOABERR,
    FLG_NOGDEFL,
    FLG_NONUT,
    FLG_RADIANS,
    FLG_SIDEREAL,
    FLG_SPEED,
    FLG_TOPOCTR,
    FLG_TRUEPOS,
    FLG_XYZ,
    SUN,
)
from ephemeris_engine.context import EngineContext, get_context
from ephemeris_engine.pipeline import compute_position
from ephemeris_engine.search.events import EVENT_KINDS, find_event
from ephemeris_engine.time_utils import format_jd, parse_date

logger = logging.getLogger(__name__)

FLAG_NAMES = {
    'helctr': FLG_HELCTR,
    'baryctr': FLG_BARYCTR,
    'topoctr': FLG_TOPOCTR,
    'truepos': FLG_TRUEPOS,
    'j2000': FLG_J2000,
    'nonut': FLG_NONUT,
    'noaberr': FLG_NOABERR,
    'nogdefl': FLG_NOGDEFL,
    'equatorial': FLG_EQUATORIAL,
    'xyz': FLG_XYZ,
    'radians': FLG_RADIANS,
    'sidereal': FLG_SIDEREAL,
    'icrs': FLG_ICRS,
}

DISC_NAMES = {
    'center': BIT_DISC_CENTER,
    'bottom': BIT_DISC_BOTTOM,
    'norefrac': BIT_NO_REFRACTION,
}

_BODY_NAME_TO_NUM = {name.lower().replace(' ', '-'): num for num, name in BODY_NAMES.items()}


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or EPHEMERIS_ENGINE_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('EPHEMERIS_ENGINE_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def parse_body(value: str) -> int:
    """Parse a body specifier: number, name, or 'ast:N' for numbered minor planet N.

    Parameters:
        value: Body number string or name (case-insensitive, spaces as hyphens).

    Returns:
        Body number.

    Raises:
        ValueError: If value names no body.
    """
    v = value.strip().lower()
    if v.startswith('ast:'):
        return AST_OFFSET + int(v[4:])
    try:
        return int(v)
    except ValueError:
        pass
    key = v.replace(' ', '-')
    if key in _BODY_NAME_TO_NUM:
        return _BODY_NAME_TO_NUM[key]
    raise ValueError(
        f'Unknown body {value!r}; use a number or a name: ' + ', '.join(_BODY_NAME_TO_NUM)
    )


def _flag_bits(names: list[str] | None, table: dict[str, int]) -> int:
    bits = 0
    for name in names or []:
        bits |= table[name]
    return bits


def _context(args: argparse.Namespace) -> EngineContext:
    ctx = get_context()
    if args.ephe_path:
        ctx.set_ephe_path(args.ephe_path)
    ctx.set_backend(args.backend, allow_fallback=not args.no_fallback)
    if args.latitude is not None or args.longitude is not None:
        ctx.set_topo(args.longitude or 0.0, args.latitude or 0.0, args.altitude)
    return ctx


def _calc_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the position of one body (calc subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        ctx = _context(args)
        epoch = parse_date(args.date, ctx)
        flags = _flag_bits(args.flags, FLAG_NAMES) | FLG_SPEED
        result = compute_position(args.body, epoch, flags, ctx)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    if not result.ok:
        print(f'Error: {result.error}: {result.message}', file=sys.stderr)
        return 1
    if result.message:
        print(f'Note: {result.message}', file=sys.stderr)
    name = BODY_NAMES.get(args.body, str(args.body))
    print(f'{name} at {format_jd(epoch.jd)} UT ({result.backend})')
    labels = ('x', 'y', 'z') if flags & FLG_XYZ else ('longitude', 'latitude', 'distance')
    for label, value, speed in zip(labels, result.values[:3], result.values[3:]):
        print(f'  {label:<10} {value:18.10f}   speed {speed:16.10f}')
    return 0


def _event_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Search for an event and print its time(s) (event subcommand).

    Returns:
        Exit code 0 when found, 1 on error or when nothing was found.
    """
    try:
        ctx = _context(args)
        start = parse_date(args.date, ctx)
        options = {'disc': _flag_bits(args.disc, DISC_NAMES)}
        if args.target_lon is not None:
            options['longitude'] = args.target_lon
        result = find_event(
            args.kind,
            args.body,
            start,
            location=ctx.topo,
            direction=-1 if args.backward else 1,
            ctx=ctx,
            **options,
        )
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    if not result.ok:
        print(f'{result.error}: {result.message}', file=sys.stderr)
        return 1
    for name, t in result.times.items():
        print(f'{name:<10} {format_jd(t)} UT  (JD {t:.6f})')
    if result.flags:
        print(f'{"flags":<10} {result.flags}')
    for name, value in sorted(result.attributes.items()):
        print(f'{name:<10} {value:.6f}')
    return 0


def _add_common(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('--date', required=True, help='UTC date/time, e.g. 2024-04-08T18:00')
    sub.add_argument(
        '--body',
        type=parse_body,
        default=SUN,
        help='Body number or name (sun, moon, mars, ..., ast:433)',
    )
    sub.add_argument(
        '--backend',
        default=BACKEND_SWEPH,
        choices=[BACKEND_SWEPH, BACKEND_JPL, BACKEND_SERIES, BACKEND_SPK],
        help='Position source',
    )
    sub.add_argument(
        '--no-fallback',
        action='store_true',
        help='Fail instead of using the series when files are missing',
    )
    sub.add_argument('--ephe-path', default=None, help='Ephemeris directories; env: EPHE_PATH')
    sub.add_argument('--latitude', type=float, default=None, help='Observer latitude (deg)')
    sub.add_argument(
        '--longitude', type=float, default=None, help='Observer longitude (deg, east positive)'
    )
    sub.add_argument('--altitude', type=float, default=0.0, help='Observer altitude (m)')
    sub.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')


def main() -> int:
    """Entry point for ephemeris-engine CLI (calc | event).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='ephemeris-engine',
        description='Body positions and astronomical event searches.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    calc_parser = subparsers.add_parser('calc', help='Position of a body')
    _add_common(calc_parser)
    calc_parser.add_argument(
        '--flags',
        nargs='*',
        default=None,
        choices=sorted(FLAG_NAMES),
        help='Calculation flags (e.g. equatorial helctr xyz)',
    )
    calc_parser.set_defaults(func=_calc_cmd)

    event_parser = subparsers.add_parser('event', help='Search for an event')
    _add_common(event_parser)
    event_parser.add_argument('--kind', required=True, choices=EVENT_KINDS, help='Event kind')
    event_parser.add_argument(
        '--target-lon',
        type=float,
        default=None,
        help='Longitude (deg) for sun-crossing, moon-crossing and helio-crossing',
    )
    event_parser.add_argument(
        '--disc',
        nargs='*',
        default=None,
        choices=sorted(DISC_NAMES),
        help='Rise/set disc options',
    )
    event_parser.add_argument(
        '--backward', action='store_true', help='Search backward from --date'
    )
    event_parser.set_defaults(func=_event_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


if __name__ == '__main__':
    sys.exit(main())
