from typing import NamedTuple, Optional

from ofc.engine.board import Board, RowId, is_foul
from ofc.engine.cards import HEIGHT_TO_VALUE
from ofc.engine.evaluator import HandEvaluation, HandRank


DEFAULT_FANTASYLAND_CARDS = 13
TRIPS_FANTASYLAND_CARDS   = 16

PAIR_FANTASYLAND_CARDS = {
    HEIGHT_TO_VALUE['Q']: 13,
    HEIGHT_TO_VALUE['K']: 14,
    HEIGHT_TO_VALUE['A']: 15,
}


class FantasylandQualification(NamedTuple):
    eligible   : bool
    card_count : Optional[int]


NOT_ELIGIBLE = FantasylandQualification(False, None)


def fantasyland_qualification(
        top_evaluation : HandEvaluation,
        fouled         : bool
) -> FantasylandQualification:
    if fouled:
        return NOT_ELIGIBLE

    if top_evaluation.rank == HandRank.THREE_OF_A_KIND:
        return FantasylandQualification(True, TRIPS_FANTASYLAND_CARDS)

    if top_evaluation.rank == HandRank.ONE_PAIR:
        card_count = PAIR_FANTASYLAND_CARDS.get(top_evaluation.tiebreak[0])
        if card_count is not None:
            return FantasylandQualification(True, card_count)

    return NOT_ELIGIBLE


def board_fantasyland_qualification(board: Board) -> FantasylandQualification:
    evaluations = board.evaluate()

    return fantasyland_qualification(
        evaluations[RowId.top],
        is_foul(evaluations)
    )
