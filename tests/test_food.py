"""Tests for food placement."""

import numpy as np
import pytest

from wrap_snake.config import GRID_EXTENT
from wrap_snake.food import FoodPlacementError, FoodType, generate_food


def interior_cells():
    return {(x, y) for x in range(1, GRID_EXTENT - 1) for y in range(1, GRID_EXTENT - 1)}


class TestGenerateFood:
    """Tests for generate_food()."""

    def test_food_is_inside_border_ring(self):
        """Food never lands on the outermost row or column."""
        rng = np.random.default_rng(0)
        for _ in range(500):
            (x, y), _ = generate_food(set(), rng)
            assert 1 <= x <= GRID_EXTENT - 2
            assert 1 <= y <= GRID_EXTENT - 2

    def test_food_avoids_occupied_cells(self):
        """Food is never placed on an occupied cell."""
        rng = np.random.default_rng(1)
        occupied = {(x, y) for x in range(1, GRID_EXTENT - 1) for y in range(1, 10)}
        for _ in range(200):
            food, _ = generate_food(occupied, rng)
            assert food not in occupied

    def test_positions_are_plain_ints(self):
        """Returned coordinates are Python ints, not numpy scalars."""
        (x, y), _ = generate_food(set(), np.random.default_rng(2))
        assert type(x) is int and type(y) is int

    def test_same_seed_same_food(self):
        """A fixed seed gives a reproducible sequence."""
        a = np.random.default_rng(42)
        b = np.random.default_rng(42)
        body = [(5, 5), (4, 5), (3, 5)]
        assert [generate_food(body, a) for _ in range(10)] == [generate_food(body, b) for _ in range(10)]

    def test_type_split_is_roughly_eighty_twenty(self):
        """About 80% of food is normal."""
        rng = np.random.default_rng(7)
        types = [generate_food(set(), rng)[1] for _ in range(2000)]
        normal = types.count(FoodType.NORMAL) / len(types)
        assert 0.75 < normal < 0.85
        assert FoodType.SPECIAL in types

    def test_single_free_cell_found_after_attempts_run_out(self):
        """When sampling gives up, the last free cell is still found."""
        free = (GRID_EXTENT // 2, GRID_EXTENT // 2)
        occupied = interior_cells() - {free}
        food, _ = generate_food(occupied, np.random.default_rng(3), max_attempts=5)
        assert food == free

    def test_full_interior_raises(self):
        """A fully covered interior is reported instead of looping forever."""
        with pytest.raises(FoodPlacementError):
            generate_food(interior_cells(), np.random.default_rng(4), max_attempts=10)

    def test_border_cells_do_not_count_as_free(self):
        """Free border cells cannot host food."""
        occupied = interior_cells()
        assert (0, 0) not in occupied
        with pytest.raises(FoodPlacementError):
            generate_food(occupied, np.random.default_rng(5), max_attempts=1)
