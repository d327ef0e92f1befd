"""Hand advisor - picks a discard, keep or call by shanten reduction."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from hkmahjong.core.meld import CallOption, CallType
from hkmahjong.core.tile import Tile
from hkmahjong.rules.agari import is_winning_hand
from hkmahjong.rules.shanten import calculate_shanten
from hkmahjong.advice.summary import (
    AdviceAction, AdviceAlternative, AdviceResult, GameSummary,
)

logger = logging.getLogger(__name__)

MIN_PRIORITY = 1
MAX_PRIORITY = 10


@dataclass
class AdvisorConfig:
    """Tunable advice policy.

    The call weights are heuristics, not part of the game's scoring rules.
    """
    call_shanten_weight: int = 3
    run_call_bonus: int = 1
    honor_call_penalty: int = 1
    call_threshold: int = 7
    max_call_priority: int = 9
    max_alternatives: int = 3
    alternative_priority_drop: int = 2
    discard_preview: int = 3
    wait_preview: int = 5
    far_preview: int = 3


DEFAULT_CONFIG = AdvisorConfig()


@dataclass
class DiscardOption:
    """Outcome of discarding one tile from a 14-tile hand."""
    tile: Tile
    shanten: int
    improvements: List[str] = field(default_factory=list)


def analyze_hand(summary: GameSummary,
                 config: Optional[AdvisorConfig] = None) -> AdviceResult:
    """Recommend the next action.

    Order: declare a win on the drawn tile, take a strong call, pick the
    best discard from 14 tiles, or describe the waits of 13 tiles.
    """
    config = config or DEFAULT_CONFIG
    called = summary.called_melds
    current = summary.current_hand

    if summary.drawn_tile is not None and is_winning_hand(current, called):
        logger.debug("Drawn tile %s completes the hand", summary.drawn_tile)
        return AdviceResult(
            action=AdviceAction.KEEP,
            tile=summary.drawn_tile,
            reasoning="Winning hand! Declare mahjong.",
            priority=MAX_PRIORITY,
        )

    if summary.available_calls:
        call_advice = _analyze_calls(summary.hand, summary.available_calls, called, config)
        if call_advice is not None:
            return call_advice

    if len(current) == 14 - 3 * called:
        return _analyze_discards(current, called, config)

    return _analyze_waiting(current, called, config)


def evaluate_call(hand: Sequence[Tile], call: CallOption, called_melds: int = 0,
                  config: Optional[AdvisorConfig] = None) -> int:
    """Heuristic value of a call, 0 or more.

    Shanten gained by exposing the meld is weighted, runs get a bonus for
    flexibility and claiming an honor is penalized.
    """
    config = config or DEFAULT_CONFIG
    remaining = list(hand)
    for needed in call.hand_tiles:
        idx = next((i for i, t in enumerate(remaining) if t.same_kind(needed)), None)
        if idx is None:
            logger.debug("Cannot %s: %s not in hand", call.call_type.value, needed)
            return 0
        del remaining[idx]

    before = calculate_shanten(hand, called_melds).shanten
    after = calculate_shanten(remaining, called_melds + 1).shanten

    score = (before - after) * config.call_shanten_weight
    if call.call_type == CallType.SEQUENCE_CLAIM:
        score += config.run_call_bonus
    if call.claimed.is_honor:
        score -= config.honor_call_penalty
    return max(0, score)


def _analyze_calls(hand: Sequence[Tile], calls: Sequence[CallOption],
                   called_melds: int, config: AdvisorConfig) -> Optional[AdviceResult]:
    scored = [(evaluate_call(hand, call, called_melds, config), call) for call in calls]

    best_index = 0
    for i, (score, _) in enumerate(scored):
        if score > scored[best_index][0]:
            best_index = i
    best_score, best_call = scored[best_index]

    if best_score < config.call_threshold:
        logger.debug("Best call scored %d, below threshold %d",
                     best_score, config.call_threshold)
        return None

    alternatives = [
        AdviceAlternative(
            action=AdviceAction.CALL,
            tile=call.claimed,
            reasoning=f"Alternative: call {call.call_type.value}",
            priority=_clamp_priority(score),
            call=call,
        )
        for i, (score, call) in enumerate(scored) if i != best_index
    ]

    return AdviceResult(
        action=AdviceAction.CALL,
        tile=best_call.claimed,
        reasoning=(f"Call {best_call.call_type.value} to improve hand structure. "
                   f"This gives you a completed meld and better chances."),
        priority=_clamp_priority(min(config.max_call_priority, best_score)),
        alternatives=alternatives,
        call=best_call,
    )


def rank_discards(hand: Sequence[Tile], called_melds: int = 0) -> List[DiscardOption]:
    """Every distinct discard, best first.

    Ranked by resulting shanten, then by number of improving kinds. Ties
    keep hand order; duplicate kinds are evaluated once, for the first copy.
    """
    options = []
    seen = set()
    # Copies of one kind leave identical hands, so only the first is tried
    for i, tile in enumerate(hand):
        if tile.index34 in seen:
            continue
        seen.add(tile.index34)
        rest = list(hand[:i]) + list(hand[i + 1:])
        result = calculate_shanten(rest, called_melds)
        options.append(DiscardOption(tile, result.shanten, result.improvements))

    options.sort(key=lambda o: (o.shanten, -len(o.improvements)))
    return options


def _analyze_discards(hand: Sequence[Tile], called_melds: int,
                      config: AdvisorConfig) -> AdviceResult:
    options = rank_discards(hand, called_melds)
    best = options[0]

    if best.shanten == 0:
        reasoning = "Discard this tile to reach tenpai (ready to win). "
        priority = 9
    elif best.shanten == 1:
        reasoning = "Good discard that brings you closer to tenpai. "
        priority = 7
    else:
        reasoning = "Best available discard to improve hand structure. "
        priority = 6

    reasoning += (f"This leaves {len(best.improvements)} useful tiles: "
                  f"{_preview(best.improvements, config.discard_preview, ellipsis=True)}.")

    alternatives = [
        AdviceAlternative(
            action=AdviceAction.DISCARD,
            tile=option.tile,
            reasoning=(f"Alternative discard. Shanten: {option.shanten}, "
                       f"{len(option.improvements)} useful tiles."),
            priority=max(MIN_PRIORITY, priority - config.alternative_priority_drop),
        )
        for option in options[1:1 + config.max_alternatives]
    ]

    logger.debug("Discard %s -> shanten %d with %d useful kinds",
                 best.tile, best.shanten, len(best.improvements))
    return AdviceResult(
        action=AdviceAction.DISCARD,
        tile=best.tile,
        reasoning=reasoning,
        priority=priority,
        alternatives=alternatives,
    )


def _analyze_waiting(hand: Sequence[Tile], called_melds: int,
                     config: AdvisorConfig) -> AdviceResult:
    result = calculate_shanten(hand, called_melds)

    if result.shanten == 0:
        reasoning = (f"You're in tenpai! Wait for these tiles: "
                     f"{_preview(result.improvements, config.wait_preview)}.")
        priority = 8
    elif result.shanten == 1:
        reasoning = (f"One away from tenpai. Look for these useful tiles: "
                     f"{_preview(result.improvements, config.wait_preview)}.")
        priority = 6
    else:
        reasoning = (f"Focus on improving hand structure. {len(result.improvements)} "
                     f"tiles can help: {_preview(result.improvements, config.far_preview)}.")
        priority = 4

    return AdviceResult(
        action=AdviceAction.KEEP,
        tile=None,
        reasoning=reasoning,
        priority=priority,
    )


def _preview(keys: Sequence[str], limit: int, ellipsis: bool = False) -> str:
    text = ", ".join(keys[:limit])
    if ellipsis and len(keys) > limit:
        text += "..."
    return text


def _clamp_priority(value: int) -> int:
    return max(MIN_PRIORITY, min(MAX_PRIORITY, int(value)))


def evaluate_defensive_value(tile: Tile, visible_tiles: Sequence[Tile]) -> int:
    """Safety of discarding ``tile`` on a 1 (dangerous) to 10 (safe) scale."""
    visible_count = sum(1 for t in visible_tiles if t.same_kind(tile))

    safety = 5
    if tile.is_honor:
        safety += 2
    elif tile.is_terminal:
        safety += 1

    # Tiles already seen several times are less likely to be waited on
    safety += min(3, visible_count)

    if not tile.is_honor and 4 <= tile.value <= 6:
        safety -= 1

    return max(1, min(10, safety))


def generate_advice_summary(summary: GameSummary, advice: AdviceResult) -> str:
    """One-paragraph description of the turn for the external tip service."""
    current = summary.current_hand
    shanten = calculate_shanten(current, summary.called_melds).shanten

    description = (f"Round {summary.round_number}, playing as "
                   f"{summary.seat_wind.key_name} wind. ")
    description += f"Hand size: {len(current)}, Shanten: {shanten}. "

    if advice.action == AdviceAction.DISCARD and advice.tile is not None:
        description += f"Recommended discard: {advice.tile.key}. "
    elif advice.action == AdviceAction.CALL:
        description += "Recommended call available. "

    description += f"Priority: {advice.priority}/10. {advice.reasoning}"
    return description
