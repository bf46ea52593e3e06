from typing import List, Optional
from enum import Enum, auto
from functools import total_ordering
import random


HEIGHTS = '23456789TJQKA'
HEIGHT_TO_VALUE = dict(zip(HEIGHTS, range(2, 15)))


class Suit(Enum):
    d = auto()
    c = auto()
    s = auto()
    h = auto()


SUIT_SYMBOLS = {
    Suit.s: '♠',
    Suit.h: '♥',
    Suit.d: '♦',
    Suit.c: '♣',
}

symbol_to_suit = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}


class InsufficientCards(ValueError):
    """Raised when a deal asks for more cards than the deck holds."""


@total_ordering
class Card:
    """A playing card.

    ``value`` runs from 2 (deuce) to 14 (ace). Two cards are equal when
    they share the same ``card_id``; rank and suit only matter for hand
    evaluation.
    """

    __slots__ = ('suit', 'height', 'value', 'card_id')

    def __init__(self, suit: Suit, height: str, card_id: Optional[str] = None):
        if height == '10':
            height = 'T'
        if height not in HEIGHT_TO_VALUE:
            raise ValueError(f'Invalid height: {height}')

        object.__setattr__(self, 'suit', suit)
        object.__setattr__(self, 'height', height)
        object.__setattr__(self, 'value', HEIGHT_TO_VALUE[height])
        object.__setattr__(
            self,
            'card_id',
            card_id if card_id is not None else f'{height}{suit.name}'
        )

    def __setattr__(self, name, value):
        raise AttributeError('Card is immutable')

    def __reduce__(self):
        return (Card, (self.suit, self.height, self.card_id))

    @property
    def code(self) -> str:
        return f'{self.height}{self.suit.name}'

    @property
    def symbol(self) -> str:
        return f'{self.height}{SUIT_SYMBOLS[self.suit]}'

    def __repr__(self) -> str:
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented

        return self.card_id == other.card_id

    def __hash__(self) -> int:
        return hash(self.card_id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        c1 = (self.value, self.suit.value)
        c2 = (other.value, other.suit.value)

        return c1 < c2


def parse_card(code: str) -> Card:
    """Build a Card from a code like 'As', 'Td', '10h' or 'Q♠'."""
    if len(code) < 2:
        raise ValueError(f'Invalid card code: {code!r}')

    height, suit_char = code[:-1], code[-1]
    if suit_char in symbol_to_suit:
        suit = symbol_to_suit[suit_char]
    else:
        try:
            suit = Suit[suit_char.lower()]
        except KeyError:
            raise ValueError(f'Invalid card code: {code!r}') from None

    return Card(suit, height.upper())


def parse_cards(codes: str) -> List[Card]:
    return [parse_card(code) for code in codes.split()]


def full_deck() -> List[Card]:
    cards  = []
    serial = 1
    for suit in Suit:
        for height in HEIGHTS:
            cards.append(Card(suit, height, f'{height}{suit.name}-{serial}'))
            serial += 1

    return cards


class CardDeck():
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng   = rng if rng is not None else random.Random()
        self.cards = full_deck()
        self.shuffle()

    def __repr__(self) -> str:
        return ' '.join(repr(card) for card in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self):
        self.rng.shuffle(self.cards)

    def deal(self, n: int) -> List[Card]:
        if n < 0:
            raise ValueError(f'Cannot deal {n} cards.')
        if n > len(self.cards):
            raise InsufficientCards(
                f'Cannot deal {n} cards, only {len(self.cards)} remaining.'
            )

        dealt      = self.cards[:n]
        self.cards = self.cards[n:]

        return dealt

    def draw_card(self) -> Card:
        if len(self) == 0:
            raise InsufficientCards('The deck is empty.')

        return self.cards.pop(0)
