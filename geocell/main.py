from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

import geocell
from geocell.core.errors import GeocellError
from geocell.core.settings import get_settings


logger = logging.getLogger(__name__)


def _precision(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid precision: {text!r}") from e


def create_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="geocell", description="Convert between coordinates and geohashes"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s, env GEOCELL_LOG_LEVEL)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results and errors as JSON"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Coordinate to geohash")
    enc.add_argument("coordinate", help='"lat, lon", "lat,lon" or "lat lon"')
    enc.add_argument(
        "-p",
        "--precision",
        type=_precision,
        default=settings.default_precision,
        help="Hash length 1..12; omit for the shortest hash that reads back",
    )

    dec = sub.add_parser("decode", help="Geohash to coordinate")
    dec.add_argument("geohash")

    return parser


def _emit(out: TextIO, payload: dict[str, Any]) -> None:
    out.write(json.dumps(payload) + "\n")


def run(args: argparse.Namespace, out: TextIO, err: TextIO) -> int:
    try:
        if args.command == "encode":
            result = geocell.encode(args.coordinate, args.precision)
        else:
            result = geocell.decode(args.geohash)
    except GeocellError as exc:
        logger.debug("%s failed: %s", args.command, exc.code)
        if args.json:
            _emit(out, exc.to_payload())
        else:
            err.write(f"error: {exc.message}\n")
        return 1

    if args.json:
        _emit(out, {"result": result})
    else:
        out.write(result + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    return run(args, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
