from wildfire_sim.config import Direction, WindConfig
from wildfire_sim.fire import Fire, is_valid_position
from wildfire_sim.forest import Cell

S, H, F, B, W = (c.value for c in Cell)


def healthy(rows, cols):
    return [[H] * cols for _ in range(rows)]


def test_valid_positions():
    grid = healthy(2, 3)
    assert is_valid_position(grid, 0, 0)
    assert is_valid_position(grid, 1, 2)
    assert not is_valid_position(grid, 2, 0)
    assert not is_valid_position(grid, 0, 3)
    assert not is_valid_position(grid, -1, 1)


def test_empty_grid_has_no_valid_position():
    assert not is_valid_position([], 0, 0)


def test_burn_healthy_cell():
    grid = healthy(2, 2)
    fire = Fire(0, 0)
    fire.burn(grid, 1, 1)
    assert grid[1][1] == Cell.BURNING
    assert fire.next_front == [(0, 0), (1, 1)]


def test_burn_ignores_other_cells_and_outside():
    grid = [[S, W, B]]
    fire = Fire(0, 0)
    for col in range(3):
        fire.burn(grid, 0, col)
    fire.burn(grid, 5, 5)
    assert grid == [[S, W, B]]
    assert fire.next_front == [(0, 0)]


def test_first_spread_lights_orthogonal_neighbours():
    grid = healthy(3, 3)
    fire = Fire(1, 1)
    assert fire.spread(grid) is False
    assert {(r, c) for r in range(3) for c in range(3) if grid[r][c] == Cell.BURNING} == {
        (0, 1),
        (2, 1),
        (1, 0),
        (1, 2),
    }
    assert grid[1][1] == Cell.HEALTHY
    assert grid[0][0] == Cell.HEALTHY


def test_front_order_follows_wind_order():
    grid = healthy(3, 3)
    fire = Fire(1, 1)
    fire.spread(grid)
    assert fire.next_front == [(1 + dr, 1 + dc) for dr, dc in WindConfig().offsets()]


def test_second_spread_burns_out_previous_front():
    grid = healthy(3, 3)
    fire = Fire(1, 1)
    fire.spread(grid)
    fire.spread(grid)
    assert grid[1][1] == Cell.BURNT
    for r, c in [(0, 0), (0, 2), (2, 0), (2, 2)]:
        assert grid[r][c] == Cell.BURNING
    assert grid[0][1] == Cell.HEALTHY or grid[0][1] == Cell.BURNING


def test_fire_burns_whole_grid_then_stops():
    grid = healthy(4, 5)
    fire = Fire(0, 0)
    done = any(fire.spread(grid) for _ in range(50))
    assert done
    assert all(cell == Cell.BURNT for row in grid for cell in row)


def test_safe_and_water_cells_block_fire():
    grid = [
        [H, S, H],
        [H, W, H],
        [H, S, H],
    ]
    fire = Fire(1, 0)
    while not fire.spread(grid):
        pass
    assert [row[2] for row in grid] == [H, H, H]
    assert [row[1] for row in grid] == [S, W, S]
    assert [row[0] for row in grid] == [B, B, B]


def test_south_wind_only_spreads_down():
    grid = healthy(4, 3)
    fire = Fire(1, 1, WindConfig(directions={Direction.SOUTH}))
    while not fire.spread(grid):
        pass
    burnt = {(r, c) for r in range(4) for c in range(3) if grid[r][c] == Cell.BURNT}
    assert burnt == {(1, 1), (2, 1), (3, 1)}


def test_calm_wind_spreads_in_all_directions():
    grid = healthy(3, 3)
    fire = Fire(1, 1, WindConfig(enabled=False))
    fire.spread(grid)
    assert fire.next_front == [(1, 0), (1, 2), (0, 1), (2, 1)]


def test_no_wind_directions_burns_out_immediately():
    grid = healthy(3, 3)
    fire = Fire(1, 1, WindConfig(directions=frozenset()))
    assert fire.spread(grid) is False
    assert fire.spread(grid) is True
    assert grid[1][1] == Cell.BURNT
    assert sum(cell == Cell.HEALTHY for row in grid for cell in row) == 8