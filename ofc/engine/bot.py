import logging
from typing import Dict, Iterable, List, NamedTuple, Sequence, TYPE_CHECKING
from abc import ABC, abstractmethod
from collections import Counter

from ofc.engine.board import Board, RowId, ROW_CAPACITY
from ofc.engine.cards import Card
from ofc.engine.evaluator import evaluate_five, evaluate_three

if TYPE_CHECKING:
    from ofc.engine.state import HandState, PlayerId


logger = logging.getLogger(__name__)

# Preference order when two rows score the same
ROW_PREFERENCE = (RowId.bottom, RowId.middle, RowId.top)


class BotWeights(NamedTuple):
    base_bottom          : float = 30
    base_middle          : float = 20
    base_top             : float = 8
    value_bottom         : float = 1.25
    value_middle         : float = 0.8
    value_top            : float = -1.4
    top_broadway_penalty : float = 8
    broadway_value       : int   = 11
    foul_margin          : float = 8
    foul_penalty         : float = 45
    pairing_top          : float = 3.5
    pairing_other        : float = 2
    dead_rank_top        : float = 9
    dead_rank_other      : float = 5


DEFAULT_WEIGHTS = BotWeights()


class Placement(NamedTuple):
    card_id : str
    row     : RowId


class BotMove(NamedTuple):
    placements    : List[Placement]
    burn_card_ids : List[str]


def row_strength(row_id: RowId, cards: Sequence[Card]) -> float:
    if not cards:
        return 0

    if row_id == RowId.top:
        if len(cards) == 3:
            evaluation = evaluate_three(cards)
            return evaluation.category * 100 + evaluation.tiebreak[0]

        counts = Counter(card.value for card in cards)
        if max(counts.values()) == 2:
            return 80 + max(counts)

        return 20 + sum(card.value for card in cards) / 10

    if len(cards) == 5:
        evaluation = evaluate_five(cards)
        return evaluation.category * 100 + evaluation.tiebreak[0]

    return sum(card.value for card in cards)


def score_placement(
        board         : Board,
        row_id        : RowId,
        card          : Card,
        visible_ranks : Dict[int, int],
        weights       : BotWeights = DEFAULT_WEIGHTS
) -> float:
    """Score putting ``card`` into ``row_id``; ``board`` is left untouched."""
    row = board.rows[row_id]
    if len(row) >= ROW_CAPACITY[row_id]:
        return float('-inf')

    if row_id == RowId.bottom:
        score = weights.base_bottom + card.value * weights.value_bottom
    elif row_id == RowId.middle:
        score = weights.base_middle + card.value * weights.value_middle
    else:
        score = weights.base_top + card.value * weights.value_top
        if card.value >= weights.broadway_value:
            score -= weights.top_broadway_penalty

    trial = {
        other_id: list(board.rows[other_id])
        for other_id in RowId
    }
    trial[row_id].append(card)
    top_strength    = row_strength(RowId.top, trial[RowId.top])
    middle_strength = row_strength(RowId.middle, trial[RowId.middle])
    bottom_strength = row_strength(RowId.bottom, trial[RowId.bottom])

    if top_strength > middle_strength + weights.foul_margin:
        score -= weights.foul_penalty
    if middle_strength > bottom_strength + weights.foul_margin:
        score -= weights.foul_penalty

    unseen = max(0, 4 - visible_ranks.get(card.value, 1))
    if any(existing.value == card.value for existing in row):
        score += unseen * (
            weights.pairing_top if row_id == RowId.top else weights.pairing_other
        )
    elif unseen == 0:
        score -= (
            weights.dead_rank_top if row_id == RowId.top else weights.dead_rank_other
        )

    return score


def choose_move(
        board         : Board,
        unplaced      : Sequence[Card],
        visible_cards : Iterable[Card],
        place_count   : int,
        weights       : BotWeights = DEFAULT_WEIGHTS
) -> BotMove:
    place_count = max(0, min(place_count, len(unplaced), board.open_slots()))
    burn_count  = len(unplaced) - place_count

    burned        = sorted(unplaced, key=lambda card: card.value)[:burn_count]
    burn_card_ids = [card.card_id for card in burned]
    to_place      = sorted(
        (card for card in unplaced if card.card_id not in burn_card_ids),
        key     = lambda card: card.value,
        reverse = True
    )

    # Seen cards per rank: both boards plus the whole hand, card itself included
    visible_ranks = Counter(card.value for card in visible_cards)
    visible_ranks.update(card.value for card in unplaced)

    trial      = board.copy()
    placements = []
    for card in to_place:
        best_row   = None
        best_score = float('-inf')
        for row_id in ROW_PREFERENCE:
            score = score_placement(trial, row_id, card, visible_ranks, weights)
            if score > best_score:
                best_row, best_score = row_id, score

        if best_row is None:
            continue

        trial.add_card(best_row, card)
        placements.append(Placement(card.card_id, best_row))

    return BotMove(placements, burn_card_ids)


def choose_move_for(state: 'HandState', player_id: 'PlayerId') -> BotMove:
    """Bot decision for one seat of a hand in progress."""
    board    = state.boards[player_id]
    unplaced = state.pools[player_id]
    visible  = [
        card
        for seat_board in state.boards.values()
        for card in seat_board
    ]
    move = choose_move(
        board         = board,
        unplaced      = unplaced,
        visible_cards = visible,
        place_count   = state.place_quota(player_id),
        weights       = state.context.bot_weights,
    )
    logger.debug(
        'Bot move for %s on street %s: %s, burning %s',
        player_id.name, state.street_key(player_id), move.placements, move.burn_card_ids
    )

    return move


class Player(ABC):
    @abstractmethod
    def get_play(self, state: 'HandState', player_id: 'PlayerId') -> BotMove:
        raise NotImplementedError


class HeuristicPlayer(Player):
    def get_play(self, state: 'HandState', player_id: 'PlayerId') -> BotMove:
        return choose_move_for(state, player_id)
