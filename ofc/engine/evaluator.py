from typing import Sequence, Tuple
from enum import IntEnum
from functools import total_ordering
from collections import Counter

from ofc.engine.cards import Card


class HandRank(IntEnum):
    HIGH_CARD       = 0
    ONE_PAIR        = 1
    TWO_PAIRS       = 2
    THREE_OF_A_KIND = 3
    STRAIGHT        = 4
    FLUSH           = 5
    FULL_HOUSE      = 6
    FOUR_OF_A_KIND  = 7
    STRAIGHT_FLUSH  = 8


HAND_RANK_NAMES = {
    HandRank.HIGH_CARD:       'High Card',
    HandRank.ONE_PAIR:        'One Pair',
    HandRank.TWO_PAIRS:       'Two Pair',
    HandRank.THREE_OF_A_KIND: 'Three of a Kind',
    HandRank.STRAIGHT:        'Straight',
    HandRank.FLUSH:           'Flush',
    HandRank.FULL_HOUSE:      'Full House',
    HandRank.FOUR_OF_A_KIND:  'Four of a Kind',
    HandRank.STRAIGHT_FLUSH:  'Straight Flush',
}

WHEEL = (2, 3, 4, 5, 14)


def compare_tiebreaks(a: Sequence[int], b: Sequence[int]) -> int:
    for i in range(max(len(a), len(b))):
        left  = a[i] if i < len(a) else 0
        right = b[i] if i < len(b) else 0
        if left != right:
            return 1 if left > right else -1

    return 0


@total_ordering
class HandEvaluation():
    """Category plus tiebreak values, most significant first.

    Three and five card evaluations share the category scale, so a top
    row can be ordered against a middle row directly.
    """

    __slots__ = ('rank', 'tiebreak')

    def __init__(self, rank: HandRank, tiebreak: Sequence[int]):
        self.rank     = HandRank(rank)
        self.tiebreak = tuple(tiebreak)

    @property
    def category(self) -> int:
        return int(self.rank)

    @property
    def name(self) -> str:
        return HAND_RANK_NAMES[self.rank]

    def __repr__(self) -> str:
        return f'{self.rank.name}, {self.tiebreak}'

    def __eq__(self, other: object):
        if not isinstance(other, HandEvaluation):
            return NotImplemented

        return compare(self, other) == 0

    def __lt__(self, other: object):
        if not isinstance(other, HandEvaluation):
            return NotImplemented

        return compare(self, other) < 0

    def __hash__(self):
        tiebreak = list(self.tiebreak)
        while tiebreak and tiebreak[-1] == 0:
            tiebreak.pop()

        return hash((self.rank, tuple(tiebreak)))


def compare(a: HandEvaluation, b: HandEvaluation) -> int:
    if a.rank != b.rank:
        return 1 if a.rank > b.rank else -1

    return compare_tiebreaks(a.tiebreak, b.tiebreak)


def _grouped_values(cards: Sequence[Card]) -> Tuple[Tuple[int, int], ...]:
    # (value, count) sorted by count then value, both descending
    counter = Counter(card.value for card in cards)

    return tuple(sorted(
        counter.items(),
        key     = lambda item: (item[1], item[0]),
        reverse = True
    ))


def _straight_high(values: Sequence[int]) -> int:
    distinct = sorted(set(values))
    if len(distinct) != 5:
        return 0

    if tuple(distinct) == WHEEL:
        return 5

    if distinct[-1] - distinct[0] == 4:
        return distinct[-1]

    return 0


def evaluate_five(cards: Sequence[Card]) -> HandEvaluation:
    if len(cards) != 5:
        raise ValueError(f'Expected 5 cards, got {len(cards)}')

    values_desc   = sorted((card.value for card in cards), reverse=True)
    groups        = _grouped_values(cards)
    is_flush      = len({card.suit for card in cards}) == 1
    straight_high = _straight_high(values_desc)

    (top_value, top_count), *rest = groups

    if straight_high and is_flush:
        return HandEvaluation(HandRank.STRAIGHT_FLUSH, (straight_high,))

    if top_count == 4:
        return HandEvaluation(HandRank.FOUR_OF_A_KIND, (top_value, rest[0][0]))

    if top_count == 3 and rest[0][1] == 2:
        return HandEvaluation(HandRank.FULL_HOUSE, (top_value, rest[0][0]))

    if is_flush:
        return HandEvaluation(HandRank.FLUSH, values_desc)

    if straight_high:
        return HandEvaluation(HandRank.STRAIGHT, (straight_high,))

    kickers = [value for value, count in rest if count == 1]

    if top_count == 3:
        return HandEvaluation(HandRank.THREE_OF_A_KIND, (top_value, *kickers))

    if top_count == 2 and rest[0][1] == 2:
        return HandEvaluation(
            HandRank.TWO_PAIRS,
            (top_value, rest[0][0], *kickers)
        )

    if top_count == 2:
        return HandEvaluation(HandRank.ONE_PAIR, (top_value, *kickers))

    return HandEvaluation(HandRank.HIGH_CARD, values_desc)


def evaluate_three(cards: Sequence[Card]) -> HandEvaluation:
    if len(cards) != 3:
        raise ValueError(f'Expected 3 cards, got {len(cards)}')

    groups = _grouped_values(cards)
    (top_value, top_count), *rest = groups

    if top_count == 3:
        return HandEvaluation(HandRank.THREE_OF_A_KIND, (top_value,))

    if top_count == 2:
        return HandEvaluation(HandRank.ONE_PAIR, (top_value, rest[0][0]))

    return HandEvaluation(
        HandRank.HIGH_CARD,
        sorted((card.value for card in cards), reverse=True)
    )


def evaluate_row(cards: Sequence[Card]) -> HandEvaluation:
    if len(cards) == 3:
        return evaluate_three(cards)
    if len(cards) == 5:
        return evaluate_five(cards)

    raise ValueError(f'Cannot evaluate a row of {len(cards)} cards')
