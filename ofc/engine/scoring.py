"""Head-to-head comparison of two finished boards."""
import logging
from typing import Dict, List, Optional

from ofc.engine.board import Board, RowId, is_foul
from ofc.engine.evaluator import HandEvaluation, compare
from ofc.engine.royalties import royalties_from_evaluations


logger = logging.getLogger(__name__)

SCOOP_BONUS = 3


class ScoringInvariantViolation(RuntimeError):
    """points_a and points_b do not sum to zero."""


class ScoreResult():
    def __init__(
            self,
            row_outcomes  : Dict[RowId, int],
            royalties_a   : int,
            royalties_b   : int,
            scoop_bonus   : int,
            points_a      : int,
            points_b      : int,
            foul_a        : bool,
            foul_b        : bool,
            evaluations_a : Optional[Dict[RowId, HandEvaluation]] = None,
            evaluations_b : Optional[Dict[RowId, HandEvaluation]] = None,
            notes         : Optional[List[str]] = None,
    ):
        self.row_outcomes  = row_outcomes
        self.royalties_a   = royalties_a
        self.royalties_b   = royalties_b
        self.scoop_bonus   = scoop_bonus
        self.points_a      = points_a
        self.points_b      = points_b
        self.foul_a        = foul_a
        self.foul_b        = foul_b
        self.evaluations_a = evaluations_a or {}
        self.evaluations_b = evaluations_b or {}
        self.notes         = notes or []

    def __repr__(self) -> str:
        lines = ' '.join(
            f'{row_id.name}={self.row_outcomes[row_id]:+d}'
            for row_id in RowId
        )
        return (
            f'ScoreResult({lines} royalties={self.royalties_a}/{self.royalties_b} '
            f'scoop={self.scoop_bonus:+d} points={self.points_a}/{self.points_b})'
        )

    @property
    def line_points_a(self) -> int:
        return sum(self.row_outcomes.values()) + self.scoop_bonus

    def to_dict(self) -> dict:
        breakdown = []
        for row_id in RowId:
            row = {'row': row_id.name, 'outcome': self.row_outcomes[row_id]}
            if row_id in self.evaluations_a:
                row['hand_a'] = self.evaluations_a[row_id].name
            if row_id in self.evaluations_b:
                row['hand_b'] = self.evaluations_b[row_id].name
            breakdown.append(row)

        return {
            'rows'          : {
                row_id.name: outcome
                for row_id, outcome in self.row_outcomes.items()
            },
            'breakdown'     : breakdown,
            'notes'         : list(self.notes),
            'line_points_a' : self.line_points_a,
            'royalties_a'   : self.royalties_a,
            'royalties_b'   : self.royalties_b,
            'scoop_bonus'   : self.scoop_bonus,
            'points_a'      : self.points_a,
            'points_b'      : self.points_b,
            'foul_a'        : self.foul_a,
            'foul_b'        : self.foul_b,
        }


def score_hand(board_a: Board, board_b: Board) -> ScoreResult:
    """Score board A against board B from A's point of view.

    A fouled board loses every line to a valid one; the winner collects
    one point per line but neither side is credited royalties or a scoop.
    When both boards are valid the lines are compared one by one, a
    sweep is worth an extra 3 points and the royalty difference is added
    to A's total.
    """
    for label, board in (('board_a', board_a), ('board_b', board_b)):
        if not board.is_complete():
            raise ValueError(f'{label} must hold exactly 13 cards')

    eval_a = board_a.evaluate()
    eval_b = board_b.evaluate()
    foul_a = is_foul(eval_a)
    foul_b = is_foul(eval_b)

    row_outcomes = {row_id: 0 for row_id in RowId}
    royalties_a  = 0
    royalties_b  = 0
    scoop_bonus  = 0
    notes        = []

    if foul_a and foul_b:
        notes.append('Both boards fouled: 0-0 with no scoop and no royalties.')
        logger.debug('Both boards fouled, hand scores 0-0')
    elif foul_a or foul_b:
        forced       = -1 if foul_a else 1
        row_outcomes = {row_id: forced for row_id in RowId}
        fouled_side  = 'A' if foul_a else 'B'
        notes.append(
            f'Board {fouled_side} fouled: it loses every line and no royalties are paid.'
        )
        logger.debug('Board %s fouled, every line goes the other way', fouled_side)
    else:
        for row_id in RowId:
            row_outcomes[row_id] = compare(eval_a[row_id], eval_b[row_id])

        if all(outcome == 1 for outcome in row_outcomes.values()):
            scoop_bonus = SCOOP_BONUS
            notes.append(f'Board A scoops: +{SCOOP_BONUS}.')
        elif all(outcome == -1 for outcome in row_outcomes.values()):
            scoop_bonus = -SCOOP_BONUS
            notes.append(f'Board B scoops: -{SCOOP_BONUS} to A.')

        royalties_a = royalties_from_evaluations(eval_a).total
        royalties_b = royalties_from_evaluations(eval_b).total
        notes.append(
            f'Royalties: A +{royalties_a}, B +{royalties_b}, '
            f'net to A {royalties_a - royalties_b}.'
        )

    points_a = (
        sum(row_outcomes.values()) +
        scoop_bonus +
        royalties_a - royalties_b
    )
    points_b = (
        sum(-outcome for outcome in row_outcomes.values()) -
        scoop_bonus +
        royalties_b - royalties_a
    )

    if points_a + points_b != 0:
        raise ScoringInvariantViolation(
            f'points_a={points_a} and points_b={points_b} do not cancel out'
        )

    return ScoreResult(
        row_outcomes  = row_outcomes,
        royalties_a   = royalties_a,
        royalties_b   = royalties_b,
        scoop_bonus   = scoop_bonus,
        points_a      = points_a,
        points_b      = points_b,
        foul_a        = foul_a,
        foul_b        = foul_b,
        evaluations_a = eval_a,
        evaluations_b = eval_b,
        notes         = notes,
    )
