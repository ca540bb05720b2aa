"""
Tests for the implicit grid geometry.
"""

import pytest

from outbreak_sim.spatial import GridGeometry


class TestGridGeometry:
    """Shape, index mapping and neighborhood clipping."""

    @pytest.mark.parametrize("size,columns,rows", [
        (1, 1, 1),
        (2, 2, 1),
        (10, 4, 3),
        (100, 10, 10),
        (101, 11, 10),
        (300, 18, 17),
    ])
    def test_shape(self, size, columns, rows):
        grid = GridGeometry.from_size(size)
        assert grid.columns == columns
        assert grid.rows == rows
        assert grid.rows * grid.columns >= size

    def test_empty_population(self):
        grid = GridGeometry.from_size(0)
        assert grid.shape == (0, 0)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            GridGeometry.from_size(-1)

    @pytest.mark.parametrize("size", [1, 7, 10, 99, 250])
    def test_index_round_trip(self, size):
        grid = GridGeometry.from_size(size)
        for i in range(size):
            row, col = grid.cell_of(i)
            assert row * grid.columns + col == i
            assert grid.index_of(row, col) == i
            assert grid.contains(row, col)

    def test_corner_has_clipped_neighborhood(self):
        grid = GridGeometry.from_size(100)
        assert sorted(grid.neighbors(0)) == [1, 2, 10, 11, 12, 20, 21, 22]

    def test_interior_has_full_neighborhood(self):
        grid = GridGeometry.from_size(100)
        neighbors = list(grid.neighbors(55))
        assert len(neighbors) == 24
        assert 55 not in neighbors
        for n in neighbors:
            row, col = grid.cell_of(n)
            assert max(abs(row - 5), abs(col - 5)) <= 2

    def test_neighbors_past_population_size_are_skipped(self):
        # 10 people: 4 columns, last row holds only indices 8 and 9
        grid = GridGeometry.from_size(10)
        assert sorted(grid.neighbors(0)) == [1, 2, 4, 5, 6, 8, 9]
        assert not grid.contains(2, 2)

    def test_radius_one(self):
        grid = GridGeometry.from_size(100)
        assert len(list(grid.neighbors(55, radius=1))) == 8
