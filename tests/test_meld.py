"""Tests for meld.py and the advisor's game summary"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from hkmahjong.advice.summary import GameSummary
from hkmahjong.core.meld import CallOption, CallType, Meld, MeldType
from hkmahjong.core.tile import Honor, make_tiles_from_string


class TestMeld:
    def test_triplet(self):
        meld = Meld(MeldType.TRIPLET, tuple(make_tiles_from_string("555p")), from_player=2)
        assert meld.is_open
        assert not meld.is_quad
        assert meld.tile_index34 == 13

    def test_concealed_quad(self):
        meld = Meld(MeldType.CONCEALED_QUAD, tuple(make_tiles_from_string("中中中中")))
        assert meld.is_quad
        assert not meld.is_open

    def test_sequence_lowest_tile(self):
        meld = Meld(MeldType.SEQUENCE, tuple(make_tiles_from_string("978s")))
        assert meld.tile_index34 == 24

    def test_wrong_tile_count(self):
        with pytest.raises(ValueError):
            Meld(MeldType.TRIPLET, tuple(make_tiles_from_string("55p")))
        with pytest.raises(ValueError):
            Meld(MeldType.QUAD, tuple(make_tiles_from_string("555p")))


class TestCallOption:
    def test_claimed_defaults_to_first(self):
        meld_tiles = tuple(make_tiles_from_string("312m"))
        call = CallOption(CallType.SEQUENCE_CLAIM, meld_tiles, from_player=3)
        assert call.claimed == meld_tiles[0]
        assert call.hand_tiles == meld_tiles[1:]

    def test_explicit_claimed_tile(self):
        meld_tiles = tuple(make_tiles_from_string("123m"))
        call = CallOption(CallType.SEQUENCE_CLAIM, meld_tiles, 3, claimed_tile=meld_tiles[1])
        assert call.claimed == meld_tiles[1]
        assert call.hand_tiles == (meld_tiles[0], meld_tiles[2])

    def test_claimed_tile_outside_meld(self):
        meld_tiles = tuple(make_tiles_from_string("777s"))
        discard = make_tiles_from_string("7s")[0]
        call = CallOption(CallType.TRIPLET_CLAIM, meld_tiles, 1, claimed_tile=discard)
        assert len(call.hand_tiles) == 2

    @pytest.mark.parametrize("call_type,meld_type,s", [
        (CallType.SEQUENCE_CLAIM, MeldType.SEQUENCE, "456p"),
        (CallType.TRIPLET_CLAIM, MeldType.TRIPLET, "東東東"),
        (CallType.QUAD_CLAIM, MeldType.QUAD, "9999m"),
    ])
    def test_to_meld(self, call_type, meld_type, s):
        call = CallOption(call_type, tuple(make_tiles_from_string(s)), from_player=1)
        meld = call.to_meld()
        assert meld.meld_type == meld_type
        assert meld.from_player == 1
        assert meld.tiles == call.tiles


class TestGameSummary:
    def test_current_hand(self):
        hand = make_tiles_from_string("123m")
        drawn = make_tiles_from_string("4m")[0]
        summary = GameSummary(hand=hand, drawn_tile=drawn)
        assert summary.current_hand == hand + [drawn]
        assert summary.hand == hand

    def test_winds_by_name(self):
        summary = GameSummary(hand=make_tiles_from_string("123m"),
                              seat_wind="south", prevalent_wind="西")
        assert summary.seat_wind == Honor.SOUTH
        assert summary.prevalent_wind == Honor.WEST

    def test_bad_wind(self):
        with pytest.raises(ValueError):
            GameSummary(hand=[], seat_wind="up")

    def test_called_melds(self):
        meld = Meld(MeldType.TRIPLET, tuple(make_tiles_from_string("555p")), from_player=2)
        summary = GameSummary(hand=make_tiles_from_string("123m456s11p"), melds=[meld])
        assert summary.called_melds == 1
        assert summary.bonus_tiles == []
