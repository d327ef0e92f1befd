"""Tests for the command-line front-end"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from main import build_parser, main


class TestAdvise:
    def test_tenpai(self, capsys):
        assert main(["advise", "12345678m111p22s"]) == 0
        out = capsys.readouterr().out
        assert "KEEP" in out
        assert "man-3" in out

    def test_discard(self, capsys):
        assert main(["advise", "12345678m111p22s", "--draw", "北", "--all"]) == 0
        out = capsys.readouterr().out
        assert "DISCARD" in out
        assert "Discard candidates" in out

    def test_invalid_hand(self, capsys):
        assert main(["advise", "123m"]) == 1
        assert "Hand must have 13 or 14 tiles" in capsys.readouterr().out

    def test_bad_tile_string(self):
        assert main(["advise", "12x"]) == 1

    def test_bad_wind(self):
        assert main(["advise", "12345678m111p22s", "--seat-wind", "up"]) == 1


class TestScore:
    def test_score(self, capsys):
        assert main(["score", "123m456p789s東東東22s", "--self-draw"]) == 0
        assert "3 doubles -> 80 points" in capsys.readouterr().out

    def test_not_complete(self, capsys):
        assert main(["score", "123m456p789s東東東2s3s"]) == 0
        assert "not a complete hand" in capsys.readouterr().out

    def test_winning_tile_by_kind(self, capsys):
        assert main(["score", "123456789m111pEE", "--win", "E"]) == 0
        out = capsys.readouterr().out
        assert "not a complete hand" not in out
        assert "1 doubles -> 20 points" in out

    def test_winning_tile_missing(self, capsys):
        assert main(["score", "123456789m111pEE", "--win", "N"]) == 1
        assert "not in the hand" in capsys.readouterr().out

    def test_empty_hand(self, capsys):
        assert main(["score", ""]) == 1
        assert "no tiles" in capsys.readouterr().out


class TestDeal:
    def test_deal(self, capsys):
        assert main(["deal", "--seed", "7"]) == 0
        assert "Tiles left in wall: 84" in capsys.readouterr().out

    def test_bad_player_count(self):
        assert main(["deal", "--seed", "7", "--players", "6"]) == 1


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults(self):
        args = build_parser().parse_args(["advise", "123m"])
        assert args.round == 1
        assert args.seat_wind == "east"
        assert args.draw is None
