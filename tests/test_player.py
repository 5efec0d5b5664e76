import pytest

from reversi_board.player import Player


def test_black_opponent_is_white():
    assert Player.BLACK.opponent() is Player.WHITE


def test_white_opponent_is_black():
    assert Player.WHITE.opponent() is Player.BLACK


@pytest.mark.parametrize("player", [Player.BLACK, Player.WHITE])
def test_opponent_is_an_involution(player):
    assert player.opponent().opponent() is player


def test_none_has_no_opponent():
    with pytest.raises(ValueError):
        Player.NONE.opponent()