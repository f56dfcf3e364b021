"""End-to-end tests for resource_scanner.scanner.engine against the grid world."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from resource_scanner.config.constants import DISCOVERY_COST_PER_CELL
from resource_scanner.domain.content import Content, ContentKind
from resource_scanner.domain.coordinate import GridCoordinate
from resource_scanner.domain.grid_world import Explorer, GridWorld
from resource_scanner.domain.shapes import ScanShape, ShapeKind
from resource_scanner.errors import (
    DisclosureExhausted,
    EmptyCandidateSet,
    InsufficientResource,
    InvalidShapeParameter,
)
from resource_scanner.scanner.engine import ResourceScanner, estimate_cost, nominal_cost, scan

WANT = Content(ContentKind.COIN)


def _world_with_coin(
    coin_at: GridCoordinate, agent_at: GridCoordinate, energy: int = 1_000
) -> tuple[GridWorld, Explorer]:
    world = GridWorld.empty(5)
    world.place(coin_at, Content(ContentKind.COIN, 1))
    return world, world.spawn(agent_at, energy=energy)


class TestScan:
    def test_area_three_finds_adjacent_coin(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 3), GridCoordinate(1, 2))
        result = scan(5, explorer, ScanShape(ShapeKind.AREA, 3), WANT, world)
        assert result == (GridCoordinate(2, 3), 1)

    def test_area_three_misses_coin_out_of_reach(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 4), GridCoordinate(1, 2))
        assert scan(5, explorer, ScanShape(ShapeKind.AREA, 3), WANT, world) is None

    def test_area_three_is_free(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 3), GridCoordinate(1, 2), energy=0)
        with patch.object(world, "disclose", wraps=world.disclose) as disclose:
            scan(5, explorer, ScanShape(ShapeKind.AREA, 3), WANT, world)
        disclose.assert_not_called()
        assert explorer.energy == 0

    def test_up_ray_clipped_at_edge_finds_coin(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 0), GridCoordinate(2, 1))
        result = scan(5, explorer, ScanShape(ShapeKind.UP, 2), WANT, world)
        assert result == (GridCoordinate(2, 0), 1)
        assert explorer.energy == 1_000 - DISCOVERY_COST_PER_CELL

    def test_up_ray_does_not_look_down(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 2), GridCoordinate(2, 1))
        assert scan(5, explorer, ScanShape(ShapeKind.UP, 2), WANT, world) is None

    def test_largest_quantity_wins_across_area(self) -> None:
        world = GridWorld.empty(5)
        world.place(GridCoordinate(0, 0), Content(ContentKind.COIN, 1))
        world.place(GridCoordinate(4, 4), Content(ContentKind.COIN, 5))
        explorer = world.spawn(GridCoordinate(2, 2))
        result = scan(5, explorer, ScanShape(ShapeKind.AREA, 5), WANT, world)
        assert result == (GridCoordinate(4, 4), 5)

    def test_repeat_scan_makes_no_second_disclosure(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(4, 0), GridCoordinate(2, 2))
        shape = ScanShape(ShapeKind.AREA, 5)
        with patch.object(world, "disclose", wraps=world.disclose) as disclose:
            first = scan(5, explorer, shape, WANT, world)
            energy_after_first = explorer.energy
            second = scan(5, explorer, shape, WANT, world)
        assert disclose.call_count == 1
        assert first == second == (GridCoordinate(4, 0), 1)
        assert explorer.energy == energy_after_first

    def test_already_known_match_still_selected(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(3, 2), GridCoordinate(2, 2))
        world.local_view(explorer)
        with patch.object(world, "disclose", wraps=world.disclose) as disclose:
            result = scan(5, explorer, ScanShape(ShapeKind.RIGHT, 2), WANT, world)
        assert result == (GridCoordinate(3, 2), 1)
        disclose.assert_called_once()
        assert list(disclose.call_args.args[1]) == [GridCoordinate(4, 2)]

    def test_invalid_shape_touches_nothing(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 3), GridCoordinate(1, 2))
        with patch.object(world, "known_map", wraps=world.known_map) as known_map:
            with pytest.raises(InvalidShapeParameter):
                scan(5, explorer, ScanShape(ShapeKind.AREA, 4), WANT, world)
        known_map.assert_not_called()

    def test_local_view_beyond_caller_bound_is_ignored(self) -> None:
        world = GridWorld.empty(5)
        world.place(GridCoordinate(1, 1), Content(ContentKind.COIN, 2))
        world.place(GridCoordinate(3, 3), Content(ContentKind.COIN, 7))
        explorer = world.spawn(GridCoordinate(2, 2))
        result = scan(3, explorer, ScanShape(ShapeKind.AREA, 3), WANT, world)
        assert result == (GridCoordinate(1, 1), 2)

    def test_local_view_only_match_beyond_bound_is_none(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(3, 3), GridCoordinate(2, 2))
        assert scan(3, explorer, ScanShape(ShapeKind.AREA, 3), WANT, world) is None

    def test_off_grid_ray_is_empty_candidate_set(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 3), GridCoordinate(0, 2))
        with pytest.raises(EmptyCandidateSet):
            scan(5, explorer, ScanShape(ShapeKind.LEFT, 2), WANT, world)

    def test_not_enough_energy(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(2, 3), GridCoordinate(2, 2), energy=3)
        with pytest.raises(InsufficientResource):
            scan(5, explorer, ScanShape(ShapeKind.AREA, 5), WANT, world)
        assert explorer.energy == 3
        assert world.known_map().known_count() == 1

    def test_disclosure_budget_exhausted(self) -> None:
        world = GridWorld.empty(5, discovery_limit=1)
        explorer = world.spawn(GridCoordinate(2, 2))
        with pytest.raises(DisclosureExhausted):
            scan(5, explorer, ScanShape(ShapeKind.STRAIGHT_STAR, 1), WANT, world)


class TestCost:
    @pytest.mark.parametrize(
        ("shape", "cost"),
        [
            (ScanShape(ShapeKind.AREA, 3), 0),
            (ScanShape(ShapeKind.AREA, 5), 48),
            (ScanShape(ShapeKind.AREA, 7), 72),
            (ScanShape(ShapeKind.UP, 3), 9),
            (ScanShape(ShapeKind.DIAGONAL_LOWER_RIGHT, 2), 6),
            (ScanShape(ShapeKind.STRAIGHT_STAR, 2), 24),
            (ScanShape(ShapeKind.DIAGONAL_STAR, 1), 12),
        ],
    )
    def test_nominal_cost(self, shape: ScanShape, cost: int) -> None:
        assert nominal_cost(shape) == cost

    def test_nominal_cost_validates(self) -> None:
        with pytest.raises(InvalidShapeParameter):
            nominal_cost(ScanShape(ShapeKind.RIGHT, 0))

    def test_estimate_counts_only_unknown_cells(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(0, 0), GridCoordinate(2, 2))
        shape = ScanShape(ShapeKind.STRAIGHT_STAR, 1)
        assert estimate_cost(shape, explorer.position(), 5, world.known_map()) == 12


class TestResourceScanner:
    def test_scan_uses_snapshot_size_as_bound(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(4, 2), GridCoordinate(2, 2))
        scanner = ResourceScanner(world)
        assert scanner.scan(explorer, ScanShape(ShapeKind.RIGHT, 5), WANT) == (
            GridCoordinate(4, 2),
            1,
        )

    def test_scan_reads_snapshot_once(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(4, 4), GridCoordinate(2, 2))
        with patch.object(world, "known_map", wraps=world.known_map) as known_map:
            result = ResourceScanner(world).scan(explorer, ScanShape(ShapeKind.AREA, 5), WANT)
        assert result == (GridCoordinate(4, 4), 1)
        assert known_map.call_count == 1

    def test_invalid_shape_skips_snapshot(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(4, 4), GridCoordinate(2, 2))
        with patch.object(world, "known_map", wraps=world.known_map) as known_map:
            with pytest.raises(InvalidShapeParameter):
                ResourceScanner(world).scan(explorer, ScanShape(ShapeKind.AREA, 2), WANT)
        known_map.assert_not_called()

    def test_plan_has_no_side_effects(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(0, 0), GridCoordinate(2, 2), energy=50)
        plan = ResourceScanner(world).plan(explorer, ScanShape(ShapeKind.AREA, 5))
        assert len(plan.candidates) == 25
        assert len(plan.to_disclose) == 24
        assert plan.estimated_cost == 24 * DISCOVERY_COST_PER_CELL
        assert not plan.affordable
        assert explorer.energy == 50
        assert world.known_map().known_count() == 1

    def test_plan_for_local_view_is_free(self) -> None:
        world, explorer = _world_with_coin(GridCoordinate(0, 0), GridCoordinate(2, 2), energy=0)
        plan = ResourceScanner(world).plan(explorer, ScanShape(ShapeKind.AREA, 3))
        assert plan.to_disclose == ()
        assert plan.estimated_cost == 0
        assert plan.affordable

    def test_scanner_accepts_any_agent(self) -> None:
        class Drone:
            def position(self) -> GridCoordinate:
                return GridCoordinate(1, 1)

            def resource_budget(self) -> int:
                return 0

        world = GridWorld.empty(3)
        world.place(GridCoordinate(1, 1), Content(ContentKind.COIN, 2))
        agent = Drone()
        assert ResourceScanner(world).scan(agent, ScanShape(ShapeKind.AREA, 3), WANT) == (
            GridCoordinate(1, 1),
            2,
        )
