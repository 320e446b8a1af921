import pytest

from solong.gamemap import GameMap, MapError, read_map

CORRIDOR = ["1111111", "1P0C0E1", "1111111"]


def test_step_marks_every_reachable_cell():
    game_map = GameMap(CORRIDOR)
    game_map.step(1, 1)
    middle = game_map.rows[1]
    assert not set(middle) & set("CEP0")
    assert middle == middle.lower()
    assert game_map.rows[0] == CORRIDOR[0]


def test_res_step_restores_original_map():
    game_map = GameMap(CORRIDOR)
    game_map.step(1, 1)
    game_map.res_step(1, 1)
    assert game_map.rows == CORRIDOR


def test_step_col_counts_reachable_collectibles():
    rows = ["1111111", "1PC0C01", "10C0001", "1111111"]
    game_map = GameMap(rows)
    assert game_map.step_col(1, 1) == "".join(rows).count("C")
    assert "C" not in "".join(game_map.rows)


def test_step_col_does_not_pass_through_exit():
    game_map = GameMap(["1111111", "1P0EC01", "1111111"])
    assert game_map.step_col(1, 1) == 0
    assert game_map.rows[1][4] == "C"
    assert game_map.rows[1][3] == "E"


def test_step_stops_at_inner_wall():
    rows = ["111111", "1P1C01", "111111"]
    game_map = GameMap(rows)
    game_map.step(1, 1)
    assert game_map.rows[1][3] == "C"
    assert game_map.rows[1][1] == "p"


def test_last_column_is_never_entered():
    rows = ["111", "1P0", "111"]
    game_map = GameMap(rows)
    game_map.step(1, 1)
    assert game_map.rows[1][2] == rows[1][2]


def test_step_then_res_step_round_trip_with_branches():
    rows = ["11111111", "1P0C1001", "10E00C01", "11111111"]
    game_map = GameMap(rows)
    game_map.step(1, 1)
    assert game_map.rows != rows
    game_map.res_step(1, 1)
    assert game_map.rows == rows


def test_read_map_strips_newlines_and_sizes(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n1P1\n111\n")
    game_map = read_map(path)
    assert game_map.x_max == 2
    assert game_map.y_max == 2
    assert game_map.num_rows == len(game_map.rows)
    assert game_map.rows == GameMap(["111", "1P1", "111"]).rows


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "absent.ber")


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError):
        read_map(path)


def test_empty_rows_rejected():
    with pytest.raises(MapError):
        GameMap([])