"""Tests for resource_scanner.domain.geometry module."""

from __future__ import annotations

import pytest

from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.geometry import (
    area_offsets,
    clip_to_world,
    generate,
    ray_offsets,
    shape_offsets,
)
from resource_scanner.domain.shapes import ScanShape, ShapeKind
from resource_scanner.errors import InvalidShapeParameter


def _cells(*pairs: tuple[int, int]) -> set[GridCoordinate]:
    return {GridCoordinate(col, row) for col, row in pairs}


class TestOffsets:
    @pytest.mark.parametrize("extent", [3, 5, 7, 9])
    def test_area_has_n_squared_offsets(self, extent: int) -> None:
        offsets = area_offsets(extent)
        assert len(offsets) == extent * extent
        assert len(set(offsets)) == extent * extent
        assert (0, 0) in offsets

    def test_area_is_centered(self) -> None:
        offsets = area_offsets(5)
        assert min(dx for dx, _ in offsets) == -2
        assert max(dx for dx, _ in offsets) == 2
        assert min(dy for _, dy in offsets) == -2
        assert max(dy for _, dy in offsets) == 2

    def test_ray_excludes_origin(self) -> None:
        assert ray_offsets((1, 0), 3) == [(1, 0), (2, 0), (3, 0)]

    def test_diagonal_ray(self) -> None:
        assert ray_offsets((-1, 1), 2) == [(-1, 1), (-2, 2)]

    def test_straight_star_has_symmetric_arms(self) -> None:
        offsets = shape_offsets(ScanShape(ShapeKind.STRAIGHT_STAR, 2))
        assert set(offsets) == {
            (0, 0),
            (0, -1),
            (0, -2),
            (0, 1),
            (0, 2),
            (-1, 0),
            (-2, 0),
            (1, 0),
            (2, 0),
        }

    def test_diagonal_star_has_symmetric_arms(self) -> None:
        offsets = set(shape_offsets(ScanShape(ShapeKind.DIAGONAL_STAR, 3)))
        assert len(offsets) == 13
        assert (0, 0) in offsets
        for i in (1, 2, 3):
            assert {(i, i), (-i, -i), (i, -i), (-i, i)} <= offsets

    @pytest.mark.parametrize(
        ("kind", "step"),
        [
            (ShapeKind.UP, (0, -1)),
            (ShapeKind.DOWN, (0, 1)),
            (ShapeKind.LEFT, (-1, 0)),
            (ShapeKind.RIGHT, (1, 0)),
            (ShapeKind.DIAGONAL_UPPER_LEFT, (-1, -1)),
            (ShapeKind.DIAGONAL_UPPER_RIGHT, (1, -1)),
            (ShapeKind.DIAGONAL_LOWER_LEFT, (-1, 1)),
            (ShapeKind.DIAGONAL_LOWER_RIGHT, (1, 1)),
        ],
    )
    def test_rays_point_one_way_only(self, kind: ShapeKind, step: tuple[int, int]) -> None:
        offsets = shape_offsets(ScanShape(kind, 2))
        assert offsets == [step, (step[0] * 2, step[1] * 2)]


class TestClipToWorld:
    def test_drops_out_of_bounds_and_duplicates(self) -> None:
        cells = clip_to_world(GridCoordinate(0, 0), [(0, 0), (0, 0), (-1, 0), (1, 1), (5, 0)], 5)
        assert cells == (GridCoordinate(0, 0), GridCoordinate(1, 1))

    def test_output_is_sorted(self) -> None:
        cells = clip_to_world(GridCoordinate(2, 2), [(1, 0), (-1, 0), (0, -1)], 5)
        assert list(cells) == sorted(cells)


class TestGenerate:
    def test_area_three_centered_on_agent(self) -> None:
        cells = generate(ScanShape(ShapeKind.AREA, 3), GridCoordinate(2, 2), 5)
        assert set(cells) == {GridCoordinate(c, r) for c in (1, 2, 3) for r in (1, 2, 3)}

    @pytest.mark.parametrize("extent", [3, 5, 7])
    @pytest.mark.parametrize("agent", [(0, 0), (2, 3), (9, 9), (4, 0)])
    def test_area_never_exceeds_n_squared(self, extent: int, agent: tuple[int, int]) -> None:
        cells = generate(ScanShape(ShapeKind.AREA, extent), GridCoordinate(*agent), 10)
        assert 0 < len(cells) <= extent * extent

    def test_area_in_the_middle_is_not_clipped(self) -> None:
        cells = generate(ScanShape(ShapeKind.AREA, 5), GridCoordinate(5, 5), 11)
        assert len(cells) == 25

    def test_area_in_corner_is_clipped(self) -> None:
        cells = generate(ScanShape(ShapeKind.AREA, 3), GridCoordinate(0, 0), 5)
        assert set(cells) == _cells((0, 0), (1, 0), (0, 1), (1, 1))

    @pytest.mark.parametrize("kind", list(ShapeKind))
    @pytest.mark.parametrize("agent", [(0, 0), (0, 4), (4, 0), (4, 4), (2, 2)])
    def test_every_cell_is_in_bounds(self, kind: ShapeKind, agent: tuple[int, int]) -> None:
        extent = 7 if kind is ShapeKind.AREA else 6
        cells = generate(ScanShape(kind, extent), GridCoordinate(*agent), 5)
        for cell in cells:
            assert 0 <= cell.col < 5
            assert 0 <= cell.row < 5

    @pytest.mark.parametrize("kind", list(ShapeKind))
    def test_output_has_no_duplicates(self, kind: ShapeKind) -> None:
        extent = 5 if kind is ShapeKind.AREA else 3
        cells = generate(ScanShape(kind, extent), GridCoordinate(3, 3), 8)
        assert len(cells) == len(set(cells))

    def test_up_ray_from_agent(self) -> None:
        cells = generate(ScanShape(ShapeKind.UP, 2), GridCoordinate(2, 3), 5)
        assert set(cells) == _cells((2, 2), (2, 1))

    def test_up_ray_is_clipped_at_top_edge(self) -> None:
        cells = generate(ScanShape(ShapeKind.UP, 2), GridCoordinate(2, 1), 5)
        assert cells == (GridCoordinate(2, 0),)

    def test_ray_off_grid_is_empty(self) -> None:
        assert generate(ScanShape(ShapeKind.LEFT, 3), GridCoordinate(0, 2), 5) == ()
        assert generate(ScanShape(ShapeKind.DIAGONAL_LOWER_RIGHT, 2), GridCoordinate(4, 4), 5) == ()

    def test_star_includes_agent_cell(self) -> None:
        agent = GridCoordinate(2, 2)
        assert agent in generate(ScanShape(ShapeKind.STRAIGHT_STAR, 1), agent, 5)
        assert agent in generate(ScanShape(ShapeKind.DIAGONAL_STAR, 1), agent, 5)

    def test_straight_star_full_size(self) -> None:
        cells = generate(ScanShape(ShapeKind.STRAIGHT_STAR, 2), GridCoordinate(4, 4), 9)
        assert len(cells) == 9

    def test_invalid_shape_rejected_before_geometry(self) -> None:
        with pytest.raises(InvalidShapeParameter):
            generate(ScanShape(ShapeKind.AREA, 2), GridCoordinate(2, 2), 5)
        with pytest.raises(InvalidShapeParameter):
            generate(ScanShape(ShapeKind.AREA, 4), GridCoordinate(2, 2), 5)

    def test_zero_world_is_empty(self) -> None:
        assert generate(ScanShape(ShapeKind.AREA, 3), GridCoordinate(0, 0), 0) == ()
