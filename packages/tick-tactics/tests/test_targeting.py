"""
Test suite for range and targeting queries.

Tests cover:
- Distance bands (inclusive bounds)
- Degenerate ranges
- Attackable cells filtered by terrain and line of sight
- Nearest cell to a world point
"""

from tick_tactics import HexGraph, Terrain, attackable_cells, cells_in_range, hex_graph, nearest_cell


class TestCellsInRange:
    """Test hex distance bands."""

    def test_zero_band_is_source(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 0, 0, 0) == {0}

    def test_ring_one(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 0, 1, 1) == {1, 3}

    def test_band_inclusive(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 0, 1, 2) == {1, 2, 3, 4, 5, 6}
        assert cells_in_range(graph, 0, 2, 3) == {2, 4, 5, 6, 7, 8}

    def test_center_radius_one(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 4, 0, 1) == {1, 3, 4, 5, 6, 7, 8}

    def test_ignores_terrain_and_occupancy(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(1, Terrain.IMPASSABLE)
        graph.occupy(9, 3)
        assert cells_in_range(graph, 0, 1, 1) == {1, 3}

    def test_min_above_max(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 0, 3, 1) == set()

    def test_negative_max(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 0, -2, -1) == set()

    def test_negative_min_clamps(self):
        graph = hex_graph(3, 3)
        assert cells_in_range(graph, 0, -5, 1) == {0, 1, 3}

    def test_unknown_source(self):
        assert cells_in_range(hex_graph(2, 2), 10, 0, 5) == set()


class TestAttackableCells:
    """Test range intersected with terrain and sight."""

    def test_open_grid(self):
        graph = hex_graph(3, 3)
        assert attackable_cells(graph, 0, 1, 3) == {1, 2, 3, 4, 5, 6, 7, 8}

    def test_excludes_impassable(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(2, Terrain.IMPASSABLE)
        assert attackable_cells(graph, 0, 1, 3) == {1, 3, 4, 5, 6, 7, 8}

    def test_occupied_cells_remain_targets(self):
        graph = hex_graph(3, 3)
        graph.occupy(9, 4)
        assert 4 in attackable_cells(graph, 0, 1, 2)

    def test_excludes_hidden(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(2, Terrain.IMPASSABLE)
        graph.set_blocks_sight(4, True)
        assert attackable_cells(graph, 0, 1, 3) == {1, 3, 5, 6}

    def test_min_range_excludes_close(self):
        graph = hex_graph(3, 3)
        assert attackable_cells(graph, 0, 3, 3) == {7, 8}

    def test_degenerate(self):
        graph = hex_graph(3, 3)
        assert attackable_cells(graph, 0, 2, 1) == set()


class TestNearestCell:
    """Test snapping a world point onto the grid."""

    def test_nearest(self):
        graph = hex_graph(3, 3)
        assert nearest_cell(graph, (-1.5, 0.0, 1.0)) == 1

    def test_skips_impassable(self):
        graph = hex_graph(3, 3)
        graph.set_terrain(1, Terrain.IMPASSABLE)
        assert nearest_cell(graph, (-1.55, 0.0, 0.9)) != 1
        assert nearest_cell(graph, (-1.55, 0.0, 0.9), passable_only=False) == 1

    def test_empty_graph(self):
        assert nearest_cell(HexGraph(), (0.0, 0.0, 0.0)) is None
