from typing import Dict, NamedTuple

from ofc.engine.board import Board, RowId, is_foul
from ofc.engine.evaluator import HandEvaluation, HandRank


MIDDLE_ROYALTIES = {
    HandRank.HIGH_CARD       : 0,
    HandRank.ONE_PAIR        : 0,
    HandRank.TWO_PAIRS       : 0,
    HandRank.THREE_OF_A_KIND : 2,
    HandRank.STRAIGHT        : 4,
    HandRank.FLUSH           : 8,
    HandRank.FULL_HOUSE      : 12,
    HandRank.FOUR_OF_A_KIND  : 20,
    HandRank.STRAIGHT_FLUSH  : 30,
}

BOTTOM_ROYALTIES = {
    HandRank.HIGH_CARD       : 0,
    HandRank.ONE_PAIR        : 0,
    HandRank.TWO_PAIRS       : 0,
    HandRank.THREE_OF_A_KIND : 0,
    HandRank.STRAIGHT        : 2,
    HandRank.FLUSH           : 4,
    HandRank.FULL_HOUSE      : 6,
    HandRank.FOUR_OF_A_KIND  : 10,
    HandRank.STRAIGHT_FLUSH  : 15,
}

for _table in (MIDDLE_ROYALTIES, BOTTOM_ROYALTIES):
    if set(_table) != set(HandRank):
        raise ValueError('royalty table must cover every HandRank')

TOP_TRIPS_BASE    = 8
TOP_PAIR_MINIMUM  = 6
TOP_PAIR_OFFSET   = 5


class BoardRoyalties(NamedTuple):
    top    : int
    middle : int
    bottom : int
    fouled : bool

    @property
    def total(self) -> int:
        return self.top + self.middle + self.bottom

    def by_row(self) -> Dict[RowId, int]:
        return {
            RowId.top    : self.top,
            RowId.middle : self.middle,
            RowId.bottom : self.bottom,
        }


def top_royalty(evaluation: HandEvaluation) -> int:
    """Trips score value + 8 (22 -> 10, AAA -> 22); pairs of sixes or
    better score value - 5 (66 -> 1, AA -> 9)."""
    if evaluation.rank == HandRank.THREE_OF_A_KIND:
        return evaluation.tiebreak[0] + TOP_TRIPS_BASE

    if evaluation.rank == HandRank.ONE_PAIR and \
       evaluation.tiebreak[0] >= TOP_PAIR_MINIMUM:
        return evaluation.tiebreak[0] - TOP_PAIR_OFFSET

    return 0


def middle_royalty(evaluation: HandEvaluation) -> int:
    return MIDDLE_ROYALTIES[evaluation.rank]


def bottom_royalty(evaluation: HandEvaluation) -> int:
    return BOTTOM_ROYALTIES[evaluation.rank]


row_royalty_functions = {
    RowId.top    : top_royalty,
    RowId.middle : middle_royalty,
    RowId.bottom : bottom_royalty,
}


def row_royalty(row_id: RowId, evaluation: HandEvaluation) -> int:
    return row_royalty_functions[row_id](evaluation)


def royalties_from_evaluations(
        evaluations: Dict[RowId, HandEvaluation]
) -> BoardRoyalties:
    if is_foul(evaluations):
        return BoardRoyalties(0, 0, 0, True)

    return BoardRoyalties(
        top    = top_royalty(evaluations[RowId.top]),
        middle = middle_royalty(evaluations[RowId.middle]),
        bottom = bottom_royalty(evaluations[RowId.bottom]),
        fouled = False,
    )


def board_royalties(board: Board) -> BoardRoyalties:
    return royalties_from_evaluations(board.evaluate())
