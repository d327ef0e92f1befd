#!/usr/bin/env python3
"""Hong Kong Mahjong hand advisor - terminal front-end."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from hkmahjong.advice.advisor import analyze_hand, generate_advice_summary, rank_discards
from hkmahjong.advice.summary import GameSummary
from hkmahjong.core.errors import MahjongError
from hkmahjong.core.tile import WINDS, Tile, make_tiles_from_string, sort_tiles
from hkmahjong.core.wall import create_wall, deal_hands
from hkmahjong.rules.agari import is_winning_hand
from hkmahjong.rules.scoring import score_hand
from hkmahjong.rules.shanten import calculate_shanten

console = Console()


def _tiles_str(tiles: List[Tile]) -> str:
    return " ".join(t.name for t in tiles)


def _single_tile(text: str) -> Tile:
    tiles = make_tiles_from_string(text)
    if len(tiles) != 1:
        raise ValueError(f"expected exactly one tile, got {text!r}")
    return tiles[0]


def cmd_advise(args) -> int:
    hand = make_tiles_from_string(args.hand)
    drawn = _single_tile(args.draw) if args.draw else None
    summary = GameSummary(
        hand=hand,
        drawn_tile=drawn,
        round_number=args.round,
        seat_wind=args.seat_wind,
        prevalent_wind=args.prevalent_wind,
    )
    advice = analyze_hand(summary)

    tile_part = f" [bold]{advice.tile.name}[/bold]" if advice.tile else ""
    console.print(Panel(
        f"[bold cyan]{advice.action.value.upper()}[/bold cyan]{tile_part}"
        f"  (priority {advice.priority}/10)\n{advice.reasoning}",
        title=_tiles_str(summary.current_hand),
        border_style="cyan",
    ))

    if advice.alternatives:
        table = Table(title="Alternatives")
        table.add_column("Action")
        table.add_column("Tile")
        table.add_column("Priority", justify="right")
        table.add_column("Reasoning")
        for alt in advice.alternatives:
            table.add_row(alt.action.value, alt.tile.name if alt.tile else "-",
                          str(alt.priority), alt.reasoning)
        console.print(table)

    if len(summary.current_hand) == 14 and args.all:
        table = Table(title="Discard candidates")
        table.add_column("Discard")
        table.add_column("Shanten", justify="right")
        table.add_column("Useful kinds")
        for option in rank_discards(summary.current_hand):
            table.add_row(option.tile.name, str(option.shanten),
                          ", ".join(option.improvements))
        console.print(table)

    console.print(f"  [dim]{generate_advice_summary(summary, advice)}[/dim]")
    return 0


def cmd_score(args) -> int:
    hand = make_tiles_from_string(args.hand)
    if not hand:
        raise ValueError("no tiles given to score")
    if args.win:
        wanted = _single_tile(args.win)
        winning_tile = next((t for t in hand if t.same_kind(wanted)), None)
        if winning_tile is None:
            raise ValueError(f"winning tile {wanted.name} is not in the hand")
    else:
        winning_tile = hand[-1]
    if not is_winning_hand(hand):
        console.print("  [yellow]Warning: this is not a complete hand[/yellow]")

    result = score_hand(hand, winning_tile, args.self_draw,
                        args.seat_wind, args.prevalent_wind)
    for line in result.details:
        console.print(f"    {line}")
    console.print(f"  [bold]{result.doubles} doubles -> {result.score} points[/bold]")
    return 0


def cmd_deal(args) -> int:
    wall = create_wall(seed=args.seed)
    deal = deal_hands(wall, args.players)

    table = Table(title=f"Deal (seed={args.seed})")
    table.add_column("Seat")
    table.add_column("Hand")
    table.add_column("Shanten", justify="right")
    for seat, hand in enumerate(deal.hands):
        table.add_row(WINDS[seat].glyph, _tiles_str(sort_tiles(hand)),
                      str(calculate_shanten(hand).shanten))
    console.print(table)
    console.print(f"  Tiles left in wall: {len(deal.remaining)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hkmahjong", description="Hong Kong Mahjong hand advisor")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_winds(p):
        p.add_argument("--seat-wind", default="east")
        p.add_argument("--prevalent-wind", default="east")

    p = sub.add_parser("advise", help="recommend a discard, keep or call")
    p.add_argument("hand", help="tiles, e.g. 123m456p789s東東")
    p.add_argument("--draw", help="the tile just drawn")
    p.add_argument("--round", type=int, default=1)
    p.add_argument("--all", action="store_true", help="list every discard candidate")
    add_winds(p)
    p.set_defaults(func=cmd_advise)

    p = sub.add_parser("score", help="score a completed hand")
    p.add_argument("hand")
    p.add_argument("--win", help="winning tile (default: last tile of the hand)")
    p.add_argument("--self-draw", action="store_true")
    add_winds(p)
    p.set_defaults(func=cmd_score)

    p = sub.add_parser("deal", help="shuffle a wall and deal starting hands")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--players", type=int, default=4)
    p.set_defaults(func=cmd_deal)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    try:
        return args.func(args)
    except (MahjongError, ValueError) as e:
        console.print(f"  [red]{e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
