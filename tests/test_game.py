import pytest

from solong.game import KEY_ESCAPE, Direction, Game, MoveResult

WIN_ROWS = ["11111", "1PCE1", "11111"]


def make_game(rows=WIN_ROWS, collectibles=1, player=(1, 1), on_change=None):
    return Game(rows, collectibles, player, on_change)


def test_collect_then_win(capsys):
    game = make_game()
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.collectibles == 0
    assert game.player == (2, 1)
    assert capsys.readouterr().out == "Movements: 1\n\n"
    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert capsys.readouterr().out == "YOU WON\n\n"
    assert game.finished


def test_old_cell_becomes_floor():
    game = make_game()
    game.move(Direction.RIGHT)
    assert game.map.rows[1][1] == "0"
    assert game.map.rows[1][2] == "P"


def test_exit_blocks_while_collectibles_remain():
    game = make_game(rows=["11111", "1PEC1", "11111"])
    assert game.move(Direction.RIGHT) is MoveResult.BLOCKED
    assert game.player == (1, 1)
    assert game.steps == 0
    assert not game.finished


def test_wall_blocks(capsys):
    game = make_game()
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert capsys.readouterr().out == ""


def test_on_change_called_only_for_moves():
    seen = []
    game = make_game(on_change=lambda g: seen.append((g.player, g.steps)))
    game.move(Direction.UP)
    assert seen == []
    game.move(Direction.RIGHT)
    assert seen == [((2, 1), 0)]


def test_escape_quits(capsys):
    game = make_game()
    assert game.handle_key(KEY_ESCAPE) is MoveResult.QUIT
    assert capsys.readouterr().out == "You quit the game\n"
    assert game.finished


def test_keys_move_player():
    game = make_game()
    assert game.handle_key(ord("d")) is MoveResult.MOVED
    assert game.player == (2, 1)
    assert game.handle_key(ord("a")) is MoveResult.MOVED
    assert game.player == (1, 1)


def test_unknown_key_ignored():
    game = make_game()
    assert game.handle_key(ord("q")) is None
    assert game.player == (1, 1)


def test_move_after_finish_raises():
    game = make_game(collectibles=0, rows=["11111", "1PE01", "11111"])
    assert game.move(Direction.RIGHT) is MoveResult.WON
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_tiles_cover_window():
    game = make_game()
    tiles = list(game.tiles())
    assert len(tiles) == game.width * game.height
    assert tiles[0] == (0, 0, "1")
    assert (1, 1, "P") in tiles
    assert "".join(ch for _, _, ch in tiles) == "".join(WIN_ROWS)


def test_vertical_moves():
    rows = ["111", "1P1", "101", "111"]
    game = make_game(rows=rows, collectibles=0)
    assert game.move(Direction.DOWN) is MoveResult.MOVED
    assert game.player == (1, 2)
    assert game.move(Direction.UP) is MoveResult.MOVED
    assert game.player == (1, 1)
    assert game.steps == 2