#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from planetstat import ONE, Region, SystemCatalog, Vec3
from planetstat.stats import count_by, primary_star_types


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Cached region query with a star type tally")
    p.add_argument("x", nargs="?", type=float, default=0.0)
    p.add_argument("y", nargs="?", type=float, default=0.0)
    p.add_argument("z", nargs="?", type=float, default=0.0)
    p.add_argument("size", nargs="?", type=float, default=40.0)
    p.add_argument("--cache-dir", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    region = Region.from_center(Vec3(args.x, args.y, args.z), ONE.scale(args.size))

    async with SystemCatalog(cache_dir=args.cache_dir) as catalog:
        result = await catalog.query(region)

    print("=" * 50)
    print(f"Chunks     : {result.chunks_used} ({result.cache_hits} cached, {result.chunks_fetched} fetched)")
    print(f"Systems    : {result.total_systems}")
    print(f"Duplicates : {result.duplicates_dropped}")
    print(f"Delay now  : {catalog.rate.delay:.2f}s")
    print("=" * 50)
    for star_type, count in count_by(primary_star_types(result.systems)):
        print(f"{star_type:35} {count:>6}")


if __name__ == "__main__":
    asyncio.run(main())
