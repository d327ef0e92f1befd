"""Tests for shanten.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

import pytest

from hkmahjong.core.errors import InvalidHandSizeError
from hkmahjong.core.tile import make_tiles_from_string, tiles_to_34_array
from hkmahjong.rules.agari import get_waiting_tiles
from hkmahjong.rules.shanten import (
    calculate_shanten, honor_kind_blocks, shanten_34, suit_blocks,
)


def tiles(s):
    return make_tiles_from_string(s)


class TestShantenValues:
    def test_winning(self):
        result = calculate_shanten(tiles("123456789m111p22s"))
        assert result.shanten == -1
        assert result.is_winning
        assert result.improvements == []

    def test_tenpai(self):
        result = calculate_shanten(tiles("12345678m111p11s"))
        assert result.shanten == 0
        assert result.is_tenpai
        assert result.improvements == ["man-3", "man-6", "man-9"]

    def test_tenpai_improvements_are_waits(self):
        hand = tiles("12345678m111p11s")
        assert calculate_shanten(hand).improvements == get_waiting_tiles(hand)

    def test_four_melds_single_tile(self):
        # 13 tiles: three runs, a triplet and a lone 1p
        result = calculate_shanten(tiles("123456789m1111p"))
        assert result.shanten == 0

    def test_isolated_tile_is_tenpai(self):
        result = calculate_shanten(tiles("1234567m111p123s"))
        assert result.shanten == 0
        assert "man-7" in result.improvements

    def test_one_shanten(self):
        result = calculate_shanten(tiles("123456m111p57s東南"))
        assert result.shanten == 1
        assert "sou-6" in result.improvements
        assert "honor-east" in result.improvements
        assert "honor-south" in result.improvements

    def test_one_shanten_with_pairs(self):
        assert calculate_shanten(tiles("1199m234p567s東東")).shanten == 1

    def test_fourteen_tiles_not_winning(self):
        # four melds and an unmatched 78s
        assert calculate_shanten(tiles("111222333m456p78s")).shanten == 0

    def test_scattered_hand(self):
        assert calculate_shanten(tiles("159m259p369s137s")).shanten == 6

    def test_all_honors(self):
        result = calculate_shanten(tiles("EEESSSWWWNNNR"))
        assert result.shanten == 0
        assert result.improvements == ["honor-red"]

    def test_improvements_sorted_and_unique(self):
        result = calculate_shanten(tiles("159m259p369s137s"))
        assert result.improvements == sorted(set(result.improvements))
        assert len(result.improvements) > 0


class TestShantenInvariants:
    @pytest.mark.parametrize("hand", [
        "12345678m111p11s", "123456m111p57s東南", "159m259p369s137s",
        "1199m234p567s東東",
    ])
    def test_order_independent(self, hand):
        ordered = tiles(hand)
        shuffled = list(ordered)
        random.Random(4).shuffle(shuffled)
        a = calculate_shanten(ordered)
        b = calculate_shanten(shuffled)
        assert a.shanten == b.shanten
        assert a.improvements == b.improvements

    def test_deterministic(self):
        hand = tiles("123456m111p57s東南")
        assert calculate_shanten(hand) == calculate_shanten(hand)

    def test_range(self):
        for seed in range(10):
            rng = random.Random(seed)
            hand = tiles("123456789m123456789p123456789s東南西北中發白")
            rng.shuffle(hand)
            result = calculate_shanten(hand[:13])
            assert -1 <= result.shanten <= 8


class TestHandSize:
    @pytest.mark.parametrize("hand", ["", "123m", "123456789m1111p2s3s"])
    def test_invalid_size(self, hand):
        with pytest.raises(InvalidHandSizeError, match="Hand must have 13 or 14 tiles"):
            calculate_shanten(tiles(hand))

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_shanten(tiles("123m"))

    def test_called_melds(self):
        assert calculate_shanten(tiles("123m456p11s"), called_melds=2).shanten == -1
        result = calculate_shanten(tiles("123m456p1s"), called_melds=2)
        assert result.shanten == 0
        assert result.improvements == ["sou-1"]

    def test_called_melds_wrong_size(self):
        with pytest.raises(InvalidHandSizeError):
            calculate_shanten(tiles("123456789m111p2s"), called_melds=1)


class TestBlocks:
    @pytest.mark.parametrize("count", [0, 1, 2, 3, 4])
    def test_honor_closed_form(self, count):
        # Honors behave like an isolated numbered tile with no neighbours
        melds, partials = honor_kind_blocks(count)
        brute = max(2 * m + t for m, t in suit_blocks((count, 0, 0, 0, 0, 0, 0, 0, 0)))
        assert 2 * melds + partials == brute

    def test_honor_table(self):
        assert [honor_kind_blocks(c) for c in range(5)] == [
            (0, 0), (0, 0), (0, 1), (1, 0), (1, 0),
        ]

    def test_suit_blocks(self):
        # 1112: triplet plus a lone 2, or pair 11 plus partial 12
        assert (1, 0) in suit_blocks((3, 1, 0, 0, 0, 0, 0, 0, 0))
        assert (0, 2) in suit_blocks((3, 1, 0, 0, 0, 0, 0, 0, 0))

    def test_shanten_34(self):
        arr = tiles_to_34_array(tiles("12345678m111p11s"))
        assert shanten_34(arr) == 0
