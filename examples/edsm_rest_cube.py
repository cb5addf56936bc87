#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from planetstat.connectors.edsm import EDSMRESTConnector
from planetstat.core.geometry import Vec3


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch one EDSM cube-systems listing (no cache, no pacing)")
    p.add_argument("x", nargs="?", type=float, default=0.0)
    p.add_argument("y", nargs="?", type=float, default=0.0)
    p.add_argument("z", nargs="?", type=float, default=0.0)
    p.add_argument("size", nargs="?", type=float, default=20.0)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with EDSMRESTConnector() as rest:
        systems, succeeded = await rest.fetch_cube(Vec3(args.x, args.y, args.z), args.size)
    print("=" * 78)
    print(f"Center     : ({args.x}, {args.y}, {args.z})")
    print(f"Size       : {args.size}")
    print(f"Systems    : {len(systems)}{'' if succeeded else ' (empty answer, API may be locked)'}")
    print("=" * 78)
    print(f"{'Name':30} | {'X':>10} | {'Y':>10} | {'Z':>10} | {'Primary star':25}")
    print("-" * 78)
    for s in systems:
        print(
            f"{s.name:30} | {s.coords.x:>10.2f} | {s.coords.y:>10.2f} | {s.coords.z:>10.2f} | {s.primary_star.type:25}"
        )
    print("=" * 78)


if __name__ == "__main__":
    asyncio.run(main())
