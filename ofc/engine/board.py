from typing import Dict, Iterator, List, Optional, Tuple
from enum import Enum, auto

from ofc.engine.cards import Card
from ofc.engine.evaluator import HandEvaluation, compare, evaluate_row


class RowId(Enum):
    top    = auto()
    middle = auto()
    bottom = auto()


ROW_CAPACITY = {
    RowId.top    : 3,
    RowId.middle : 5,
    RowId.bottom : 5,
}

ROW_LABELS = {
    RowId.top    : 'Top',
    RowId.middle : 'Middle',
    RowId.bottom : 'Bottom',
}

BOARD_SIZE = sum(ROW_CAPACITY.values())


class Board():
    def __init__(self):
        self.rows: Dict[RowId, List[Card]] = {
            row_id: []
            for row_id in RowId
        }

    def __repr__(self) -> str:
        return '\n'.join(
            f'{row_id.name:6} ' + ' '.join(repr(card) for card in self.rows[row_id])
            for row_id in RowId
        )

    def __len__(self) -> int:
        return sum(len(row) for row in self.rows.values())

    def __iter__(self) -> Iterator[Card]:
        for row_id in RowId:
            yield from self.rows[row_id]

    @property
    def top(self) -> List[Card]:
        return self.rows[RowId.top]

    @property
    def middle(self) -> List[Card]:
        return self.rows[RowId.middle]

    @property
    def bottom(self) -> List[Card]:
        return self.rows[RowId.bottom]

    @classmethod
    def from_rows(
            cls,
            top    : List[Card],
            middle : List[Card],
            bottom : List[Card]
    ) -> 'Board':
        board = cls()
        for row_id, cards in zip(RowId, (top, middle, bottom)):
            for card in cards:
                board.add_card(row_id, card)

        return board

    def copy(self) -> 'Board':
        board = Board()
        for row_id in RowId:
            board.rows[row_id] = list(self.rows[row_id])

        return board

    def is_row_full(self, row_id: RowId) -> bool:
        return len(self.rows[row_id]) >= ROW_CAPACITY[row_id]

    def open_slots(self) -> int:
        return BOARD_SIZE - len(self)

    def add_card(self, row_id: RowId, card: Card):
        if self.is_row_full(row_id):
            raise ValueError(f'Row {row_id.name} is full')

        self.rows[row_id].append(card)

    def remove_card(self, card_id: str) -> Tuple[RowId, Card]:
        row_id, index = self.locate(card_id)
        if row_id is None:
            raise ValueError(f'Card {card_id} is not on the board')

        return row_id, self.rows[row_id].pop(index)

    def locate(self, card_id: str) -> Tuple[Optional[RowId], int]:
        for row_id in RowId:
            for index, card in enumerate(self.rows[row_id]):
                if card.card_id == card_id:
                    return row_id, index

        return None, -1

    def is_complete(self) -> bool:
        return all(
            len(self.rows[row_id]) == ROW_CAPACITY[row_id]
            for row_id in RowId
        )

    def evaluate(self) -> Dict[RowId, HandEvaluation]:
        if not self.is_complete():
            raise ValueError('Board is incomplete')

        return {
            row_id: evaluate_row(self.rows[row_id])
            for row_id in RowId
        }

    def is_foul(self) -> bool:
        return is_foul(self.evaluate())


def is_foul(evaluations: Dict[RowId, HandEvaluation]) -> bool:
    # bottom >= middle >= top
    return (
        compare(evaluations[RowId.bottom], evaluations[RowId.middle]) < 0 or
        compare(evaluations[RowId.middle], evaluations[RowId.top]) < 0
    )
