#!/usr/bin/env python3
"""Command line drivers for region surveys.

Usage:
    # Terraforming candidates around a point (TSV)
    planetstat candidates --center -9530 -910 19808 --size 200

    # Every planet with a T/F terraforming flag
    planetstat terraformable --center 25 -20 25899 --size 200

    # Primary star type of every system, or a tally
    planetstat startypes --center 25 -20 25899 --size 1000 --summary
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from .clients import SystemCatalog
from .core.exceptions import PlanetStatError
from .core.geometry import ONE, Region, Vec3
from .stats import count_by, primary_star_types, survey_planets

logger = logging.getLogger("planetstat")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--center",
        nargs=3,
        type=float,
        metavar=("X", "Y", "Z"),
        default=[0.0, 0.0, 0.0],
        help="Region center in light years (default: Sol)",
    )
    common.add_argument("--size", type=float, default=200.0, help="Region edge length")
    common.add_argument("--cache-dir", default=None, help="Cache directory")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    p = argparse.ArgumentParser(prog="planetstat", description="EDSM region statistics")
    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("candidates", parents=[common], help="Terraforming candidates")
    sub.add_parser("terraformable", parents=[common], help="All planets with a T/F flag")
    startypes = sub.add_parser("startypes", parents=[common], help="Primary star types")
    startypes.add_argument("--summary", action="store_true", help="Print counts per type")
    return p.parse_args(argv)


def build_region(args: argparse.Namespace) -> Region:
    return Region.from_center(Vec3(*args.center), ONE.scale(args.size))


async def run_candidates(catalog: SystemCatalog, region: Region) -> None:
    systems = await catalog.get_systems(region)
    print("StarType\tStarTemp\tDistance")
    async for row in survey_planets(catalog, systems):
        if row.terraformable:
            print(f"{row.star_sub_type}\t{row.star_temperature or 0.0:f}\t{row.distance or 0.0:f}")


async def run_terraformable(catalog: SystemCatalog, region: Region) -> None:
    systems = await catalog.get_systems(region)
    print("StarType\tStarTemp\tDistance\tTerraformable")
    async for row in survey_planets(catalog, systems):
        flag = "T" if row.terraformable else "F"
        print(f"{row.star_type}\t{row.star_temperature or 0.0:f}\t{row.distance or 0.0:f}\t{flag}")


async def run_startypes(catalog: SystemCatalog, region: Region, summary: bool) -> None:
    systems = await catalog.get_systems(region)
    types = primary_star_types(systems)
    if summary:
        for star_type, count in count_by(types):
            print(f"{star_type}\t{count}")
        return
    for star_type in types:
        print(star_type)


async def run(args: argparse.Namespace) -> None:
    region = build_region(args)
    async with SystemCatalog(cache_dir=args.cache_dir) as catalog:
        if args.command == "candidates":
            await run_candidates(catalog, region)
        elif args.command == "terraformable":
            await run_terraformable(catalog, region)
        else:
            await run_startypes(catalog, region, args.summary)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(filename)s:%(lineno)d %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    try:
        asyncio.run(run(args))
    except PlanetStatError as e:
        logger.error("Aborted: %s: %s", type(e).__name__, e)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
