"""
Test suite for movement pathfinding and reachability.

Tests cover:
- Path structure (includes source and target, adjacent steps)
- Costs on open and mixed terrain
- Detours around impassable and occupied cells
- Unreachable targets and unknown cells
- Bounded reachable sets and their agreement with shortest paths
- Picking the most accessible cell from candidates
"""

import math

import pytest

from tick_tactics import (
    UNREACHABLE,
    HexGraph,
    Terrain,
    accessible_cells,
    hex_graph,
    most_accessible_cell,
    movement_path,
)


def assert_connected(graph, path):
    for a, b in zip(path.cells, path.cells[1:]):
        assert b in graph.neighbors(a)


class TestMovementPathBasics:
    """Test shortest paths on open ground."""

    def test_same_source_and_target(self):
        graph = hex_graph(3, 3)
        path = movement_path(graph, 4, 4)
        assert path.cells == (4,)
        assert path.cost == 0

    def test_neighbor(self):
        graph = hex_graph(3, 3)
        path = movement_path(graph, 0, 1)
        assert path.cells == (0, 1)
        assert path.cost == 1.0

    def test_corner_to_corner_costs_hex_distance(self):
        graph = hex_graph(3, 3)
        path = movement_path(graph, 0, 8)
        assert path.reachable
        assert path.cells[0] == 0
        assert path.cells[-1] == 8
        assert path.cost == graph.distance(0, 8) == 3
        assert len(path) == 4
        assert_connected(graph, path)

    def test_open_cost_equals_distance_everywhere(self):
        graph = hex_graph(5, 4)
        for cell in graph:
            assert movement_path(graph, 0, cell.id).cost == graph.distance(0, cell.id)

    def test_deterministic(self):
        graph = hex_graph(6, 6)
        assert movement_path(graph, 0, 35) == movement_path(graph, 0, 35)

    def test_source_occupant_does_not_block(self):
        graph = hex_graph(3, 3)
        graph.occupy(1, 0)
        path = movement_path(graph, 0, 8)
        assert path.cost == 3


class TestMovementPathTerrain:
    """Test terrain-weighted costs."""

    def test_terrain_cost_of_entered_cells(self):
        graph = hex_graph(3, 1)
        graph.set_terrain(1, Terrain.MEDIUM)
        graph.set_terrain(2, Terrain.HARD)
        path = movement_path(graph, 0, 2)
        assert path.cells == (0, 1, 2)
        assert path.cost == pytest.approx(5.0)

    def test_source_terrain_is_free(self):
        graph = hex_graph(2, 1)
        graph.set_terrain(0, Terrain.HARD)
        assert movement_path(graph, 0, 1).cost == 1.0

    def test_avoids_expensive_cell(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(3, Terrain.HARD)
        path = movement_path(graph, 0, 6)
        assert path.cells == (0, 1, 4, 6)
        assert path.cost == 3.0

    def test_crosses_expensive_cell_when_cheaper(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(3, Terrain.MEDIUM)
        graph.set_terrain(1, Terrain.HARD)
        path = movement_path(graph, 0, 6)
        assert path.cells == (0, 3, 6)
        assert path.cost == 3.0


class TestMovementPathBlocked:
    """Test detours and unreachable targets."""

    def test_detour_around_impassable(self):
        graph = hex_graph(3, 3)
        assert movement_path(graph, 0, 6).cost == 2
        graph.set_terrain(3, Terrain.IMPASSABLE)
        path = movement_path(graph, 0, 6)
        assert 3 not in path.cells
        assert path.cost == 3
        assert_connected(graph, path)

    def test_detour_around_occupied(self):
        graph = hex_graph(3, 3)
        graph.occupy(99, 3)
        path = movement_path(graph, 0, 6)
        assert 3 not in path.cells
        assert path.cost == 3

    def test_walled_in_source(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(1, Terrain.IMPASSABLE)
        graph.set_terrain(3, Terrain.IMPASSABLE)
        path = movement_path(graph, 0, 8)
        assert path == UNREACHABLE
        assert path.cells == ()
        assert path.cost == math.inf
        assert not path.reachable

    def test_impassable_target(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(8, Terrain.IMPASSABLE)
        assert movement_path(graph, 0, 8) == UNREACHABLE

    def test_occupied_target(self):
        graph = hex_graph(3, 3)
        graph.occupy(5, 8)
        assert movement_path(graph, 0, 8) == UNREACHABLE

    def test_unknown_cells(self):
        graph = hex_graph(3, 3)
        assert movement_path(graph, 0, 42) == UNREACHABLE
        assert movement_path(graph, -1, 0) == UNREACHABLE

    def test_empty_graph(self):
        assert movement_path(HexGraph(), 0, 0) == UNREACHABLE

    def test_disconnected_cell(self):
        graph = hex_graph(2, 1)
        far = graph.add_cell((100.0, 0.0, 100.0))
        graph.build()
        assert movement_path(graph, 0, far) == UNREACHABLE


class TestAccessibleCells:
    """Test bounded reachable sets."""

    def test_includes_source_at_zero(self):
        graph = hex_graph(3, 3)
        reach = accessible_cells(graph, 4, 2)
        assert reach[4] == 0

    def test_zero_budget(self):
        graph = hex_graph(3, 3)
        assert accessible_cells(graph, 0, 0) == {0: 0}

    def test_budget_one(self):
        graph = hex_graph(3, 3)
        assert accessible_cells(graph, 0, 1) == {0: 0, 1: 1, 3: 1}

    def test_terrain_limits_reach(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(1, Terrain.HARD)
        assert accessible_cells(graph, 0, 2) == {0: 0, 3: 1, 6: 2, 4: 2}

    def test_excludes_impassable_and_occupied(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(4, Terrain.IMPASSABLE)
        graph.occupy(1, 6)
        reach = accessible_cells(graph, 0, 10)
        assert 4 not in reach
        assert 6 not in reach
        assert set(reach) == {0, 1, 2, 3, 5, 7, 8}

    def test_never_exceeds_budget(self):
        graph = hex_graph(6, 6)
        graph.set_terrain(7, Terrain.HARD)
        graph.set_terrain(8, Terrain.MEDIUM)
        for budget in range(6):
            reach = accessible_cells(graph, 0, budget)
            assert all(cost <= budget for cost in reach.values())

    def test_costs_match_shortest_paths(self):
        graph = hex_graph(6, 6)
        for cell_id in (1, 7, 13, 19):
            graph.set_terrain(cell_id, Terrain.HARD)
        for cell_id in (3, 9, 20):
            graph.set_terrain(cell_id, Terrain.MEDIUM)
        budget = 7
        reach = accessible_cells(graph, 0, budget)
        for cell in graph:
            cost = movement_path(graph, 0, cell.id).cost
            if cost <= budget:
                assert reach[cell.id] == pytest.approx(cost)
            else:
                assert cell.id not in reach

    def test_fractional_budget(self):
        graph = hex_graph(3, 3)
        assert set(accessible_cells(graph, 0, 1.5)) == {0, 1, 3}

    def test_negative_budget(self):
        graph = hex_graph(3, 3)
        assert accessible_cells(graph, 0, -1) == {}

    def test_unknown_source(self):
        assert accessible_cells(hex_graph(2, 2), 17, 3) == {}

    def test_fresh_per_query(self):
        graph = hex_graph(3, 3)
        first = accessible_cells(graph, 0, 1)
        first[8] = 0
        assert 8 not in accessible_cells(graph, 0, 1)


class TestMostAccessibleCell:
    """Test choosing the cheapest candidate to reach."""

    def test_picks_cheapest(self):
        graph = hex_graph(3, 3)
        assert most_accessible_cell(graph, 0, [8, 4, 1]) == (1, 1.0)

    def test_tie_keeps_first(self):
        graph = hex_graph(3, 3)
        assert most_accessible_cell(graph, 0, [3, 1]) == (3, 1.0)

    def test_skips_unenterable(self):
        graph = hex_graph(3, 3)
        graph.occupy(2, 1)
        graph.set_terrain(5, Terrain.IMPASSABLE)
        cell_id, cost = most_accessible_cell(graph, 0, [1, 5, 4, 8])
        assert cell_id == 4
        assert cost == 2.0

    def test_nothing_reachable(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(1, Terrain.IMPASSABLE)
        graph.set_terrain(3, Terrain.IMPASSABLE)
        assert most_accessible_cell(graph, 0, [5, 8]) == (None, math.inf)

    def test_no_candidates(self):
        assert most_accessible_cell(hex_graph(2, 2), 0, []) == (None, math.inf)
