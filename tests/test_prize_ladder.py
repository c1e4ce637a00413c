"""Tests for the prize ladder table and its helpers."""

import pytest

from milhao_app.constants.game_constants import NO_TITLE_REACHED, WIN_PRIZE
from milhao_app.core import prize_ladder
from milhao_app.core.models import GameStatus


def test_ladder_has_sixteen_ordered_levels():
    levels = [entry.level for entry in prize_ladder.PRIZE_LADDER]
    assert levels == list(range(1, 17))


def test_prizes_strictly_increase_up_to_the_million():
    prizes = [entry.prize for entry in prize_ladder.PRIZE_LADDER]
    assert prizes == sorted(prizes)
    assert len(set(prizes)) == len(prizes)
    assert prizes[-1] == WIN_PRIZE


def test_level_five_amounts():
    entry = prize_ladder.entry_for(5)
    assert (entry.prize, entry.stop, entry.wrong) == (5_000, 4_000, 2_000)


def test_final_level_awards_nothing_for_stopping_or_failing():
    final = prize_ladder.entry_for(16)
    assert final.stop == 0
    assert final.wrong == 0


@pytest.mark.parametrize("level", range(2, 16))
def test_wrong_never_exceeds_stop(level):
    entry = prize_ladder.entry_for(level)
    assert entry.wrong <= entry.stop < entry.prize


def test_lookup_out_of_range():
    assert prize_ladder.lookup(0) is None
    assert prize_ladder.lookup(17) is None
    with pytest.raises(IndexError):
        prize_ladder.entry_for(17)


class TestReachedTitle:
    def test_no_title_while_playing(self):
        assert prize_ladder.reached_title(GameStatus.PLAYING, 4) is None

    def test_title_of_last_completed_level(self):
        assert prize_ladder.reached_title(GameStatus.LOST, 6) == prize_ladder.entry_for(5).title

    def test_nothing_completed(self):
        assert prize_ladder.reached_title(GameStatus.STOPPED, 1) == NO_TITLE_REACHED

    def test_win_uses_final_title(self):
        assert prize_ladder.reached_title(GameStatus.WON, 16) == prize_ladder.entry_for(16).title


def test_format_prize():
    assert prize_ladder.format_prize(10_000) == "R$ 10.000"
    assert prize_ladder.format_prize(1_000_000) == "R$ 1.000.000"
    assert prize_ladder.format_prize(0) == "R$ 0"
