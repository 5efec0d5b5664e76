import random

import pytest

from reversi_board.board import Board, IllegalMoveError
from reversi_board.player import Player


def test_initial_position_has_two_stones_each():
    board = Board()
    assert board.count(Player.BLACK) == 2
    assert board.count(Player.WHITE) == 2
    assert board.count(Player.NONE) == 60


def test_initial_centre_layout():
    board = Board(8)
    assert board[3, 3] is Player.WHITE
    assert board[3, 4] is Player.BLACK
    assert board[4, 3] is Player.BLACK
    assert board[4, 4] is Player.WHITE


def test_black_opening_moves():
    board = Board()
    moves = [(r, c) for r, c, _ in board.legal_moves(Player.BLACK)]
    assert moves == [(2, 3), (3, 2), (4, 5), (5, 4)]


def test_opening_flip_is_single_stone():
    board = Board()
    assert board.flippable_stones(2, 3, Player.BLACK) == [(3, 3)]


def test_every_opening_move_flips_a_white_stone():
    board = Board()
    for row, col, flips in board.legal_moves(Player.BLACK):
        assert flips
        assert all(board[pos] is Player.WHITE for pos in flips)
        assert board.flippable_stones(row, col, Player.BLACK) == flips


def test_flippable_off_board_is_empty():
    board = Board()
    assert board.flippable_stones(-1, 0, Player.BLACK) == []
    assert board.flippable_stones(0, 8, Player.BLACK) == []


def test_flippable_on_occupied_cell_is_empty():
    board = Board()
    assert board.flippable_stones(3, 3, Player.BLACK) == []


def test_place_flips_stones_and_updates_counts():
    board = Board()
    before_black = board.count(Player.BLACK)
    before_white = board.count(Player.WHITE)
    flips = board.place(2, 3, Player.BLACK)
    assert board[2, 3] is Player.BLACK
    assert all(board[pos] is Player.BLACK for pos in flips)
    assert board.count(Player.BLACK) == before_black + 1 + len(flips)
    assert board.count(Player.WHITE) == before_white - len(flips)


def test_illegal_place_raises_and_leaves_board_unchanged():
    board = Board()
    with pytest.raises(IllegalMoveError):
        board.place(0, 0, Player.BLACK)
    assert board[0, 0] is Player.NONE
    assert board.count(Player.NONE) == 60


def test_has_legal_move_on_start_and_empty_board():
    assert Board().has_legal_move(Player.WHITE)
    assert not Board(3).has_legal_move(Player.BLACK)


def test_small_board_starts_empty():
    board = Board(3)
    assert board.count(Player.NONE) == 9


def test_index_out_of_range_read_raises():
    board = Board()
    with pytest.raises(IndexError):
        board[8, 0]
    assert board.count(Player.NONE) == 60


def test_index_out_of_range_write_leaves_board_unchanged():
    board = Board()
    with pytest.raises(IndexError):
        board[0, -1] = Player.BLACK
    assert board.count(Player.BLACK) == 2
    assert board[0, 7] is Player.NONE


def test_setitem_requires_player():
    board = Board()
    with pytest.raises(TypeError):
        board[0, 0] = 1
    assert board[0, 0] is Player.NONE
    assert board.count(Player.NONE) == 60


def test_setitem_roundtrip():
    board = Board()
    board[0, 0] = Player.WHITE
    assert board[0, 0] is Player.WHITE


def test_winner_messages():
    board = Board()
    assert board.winner_message() == "Draw!"
    board[0, 0] = Player.BLACK
    assert board.winner_message() == "Black wins!"
    board[0, 1] = Player.WHITE
    board[0, 2] = Player.WHITE
    assert board.winner_message() == "White wins!"


def test_iteration_covers_every_cell():
    board = Board()
    cells = list(board)
    assert len(cells) == 64
    assert all(board[pos] is owner for pos, owner in cells)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_game_preserves_invariants(seed):
    rng = random.Random(seed)
    board = Board()
    player = Player.BLACK
    while board.has_legal_move(player) or board.has_legal_move(player.opponent()):
        moves = board.legal_moves(player)
        if moves:
            row, col, _ = rng.choice(moves)
            stones_before = 64 - board.count(Player.NONE)
            board.place(row, col, player)
            assert 64 - board.count(Player.NONE) == stones_before + 1
        player = player.opponent()
    assert not board.legal_moves(Player.BLACK)
    assert not board.legal_moves(Player.WHITE)
    total = board.count(Player.BLACK) + board.count(Player.WHITE) + board.count(Player.NONE)
    assert total == 64