"""Unit tests for chunk planning logic."""

from __future__ import annotations

import itertools
import random

import pytest

from planetstat.core.geometry import ONE, ChunkCoord, Region, Vec3
from planetstat.runtime.chunking import ChunkPartitioner


def _intersects(coord: ChunkCoord, region: Region, size: float) -> bool:
    cell = coord.bounds(size)
    return all(
        cell_lo < reg_hi and reg_lo < cell_hi
        for cell_lo, cell_hi, reg_lo, reg_hi in zip(
            cell.pos.as_tuple(), cell.end.as_tuple(), region.pos.as_tuple(), region.end.as_tuple()
        )
    )


class TestChunkPartitioner:
    """Test ChunkPartitioner functionality."""

    def test_origin_cube_of_twenty(self):
        """A size-20 region centered on the origin covers the eight cells around it."""
        partitioner = ChunkPartitioner(chunk_size=10)
        region = Region.from_center(Vec3(0, 0, 0), ONE.scale(20))

        coords = {plan.coord for plan in partitioner.plan(region)}

        assert coords == {ChunkCoord(x, y, z) for x, y, z in itertools.product([-1, 0], repeat=3)}

    def test_plan_order_is_x_then_y_then_z(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        region = Region(pos=Vec3(0, 0, 0), size=Vec3(20, 20, 20))

        coords = [plan.coord for plan in partitioner.plan(region)]

        assert coords == sorted(coords)
        assert coords[:2] == [ChunkCoord(0, 0, 0), ChunkCoord(0, 0, 1)]
        assert [plan.chunk_index for plan in partitioner.plan(region)] == list(range(8))

    def test_plan_carries_center_and_window(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        plan = partitioner.plan(Region(pos=Vec3(-10, 0, 20), size=Vec3(5, 5, 5)))[0]

        assert plan.coord == ChunkCoord(-1, 0, 2)
        assert plan.center == Vec3(-5, 5, 25)
        assert plan.window == 10
        assert plan.key == "n1p0p2"

    def test_region_smaller_than_cell(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        plans = partitioner.plan(Region(pos=Vec3(12, 13, 14), size=Vec3(2, 2, 2)))

        assert [p.coord for p in plans] == [ChunkCoord(1, 1, 1)]

    def test_small_region_straddling_boundary(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        plans = partitioner.plan(Region(pos=Vec3(9, 5, 5), size=Vec3(2, 1, 1)))

        assert [p.coord for p in plans] == [ChunkCoord(0, 0, 0), ChunkCoord(1, 0, 0)]

    def test_zero_size_region_yields_one_chunk(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        plans = partitioner.plan(Region(pos=Vec3(10, 10, 10), size=Vec3(0, 0, 0)))

        assert [p.coord for p in plans] == [ChunkCoord(1, 1, 1)]

    def test_aligned_region_returns_exactly_intersecting_chunks(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        region = Region(pos=Vec3(-30, 0, 10), size=Vec3(30, 10, 20))

        coords = partitioner.coords(region)

        expected = [
            ChunkCoord(x, y, z) for x in (-3, -2, -1) for y in (0,) for z in (1, 2)
        ]
        assert coords == expected

    def test_align_expands_to_grid(self):
        partitioner = ChunkPartitioner(chunk_size=10)
        aligned = partitioner.align(Region(pos=Vec3(-3, 4, 15), size=Vec3(10, 1, 7)))

        assert aligned.pos == Vec3(-10, 0, 10)
        assert aligned.end == Vec3(10, 10, 30)

    @pytest.mark.parametrize("seed", range(5))
    def test_coverage_and_no_waste(self, seed):
        """Every point is covered and every chunk touches the region."""
        rng = random.Random(seed)
        size = 10
        partitioner = ChunkPartitioner(chunk_size=size)
        region = Region(
            pos=Vec3(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50)),
            size=Vec3(rng.uniform(0.5, 35), rng.uniform(0.5, 35), rng.uniform(0.5, 35)),
        )
        coords = set(partitioner.coords(region))

        for _ in range(200):
            point = Vec3(
                rng.uniform(region.pos.x, region.end.x),
                rng.uniform(region.pos.y, region.end.y),
                rng.uniform(region.pos.z, region.end.z),
            )
            if region.contains(point):
                assert ChunkCoord.from_point(point, size) in coords

        assert all(_intersects(c, region, size) for c in coords)

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            ChunkPartitioner(chunk_size=0)
