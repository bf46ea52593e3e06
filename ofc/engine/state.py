"""Per-hand state machine for Pineapple OFC.

A ``HandState`` is created by ``start_hand`` and then driven only
through the functions in this module. Card movement functions never
raise on bad input: they leave the state untouched, store a readable
message in ``state.message`` and return False. Only broken invariants
(deck exhaustion, finalizing twice, scoring inconsistencies) raise.
"""
import logging
import random
from typing import Dict, List, Optional, Set, Tuple, Union
from enum import Enum, auto

from ofc.engine.board import Board, RowId, ROW_LABELS, BOARD_SIZE
from ofc.engine.bot import BotMove, BotWeights, DEFAULT_WEIGHTS, choose_move_for
from ofc.engine.cards import Card, CardDeck
from ofc.engine.evaluator import HandEvaluation
from ofc.engine.fantasyland import (
    DEFAULT_FANTASYLAND_CARDS, FantasylandQualification, fantasyland_qualification,
)
from ofc.engine.royalties import BoardRoyalties, royalties_from_evaluations
from ofc.engine.scoring import ScoreResult, score_hand
from ofc.engine.streets import STREET_REQUIREMENTS, FIRST_STREET, FINAL_STREET


logger = logging.getLogger(__name__)

FANTASYLAND_KEY = 'fantasyland'

OPPONENT_FANTASYLAND_CARDS = DEFAULT_FANTASYLAND_CARDS

StreetKey = Union[int, str]


class PlayerId(Enum):
    player   = auto()
    opponent = auto()


class Phase(Enum):
    DEALING             = auto()
    PLACING             = auto()
    STREET_COMPLETE     = auto()
    FANTASYLAND_PLACING = auto()
    HAND_COMPLETE       = auto()


class DiscardPolicy(Enum):
    remaining_card = auto()
    explicit       = auto()


class MatchContext():
    """State that outlives a single hand.

    Only the Fantasyland flags change from one hand to the next; the rest
    is configuration.
    """

    def __init__(
            self,
            discard_policy : DiscardPolicy = DiscardPolicy.remaining_card,
            bot_opponent   : bool = True,
            seed           : Optional[int] = None,
            bot_weights    : BotWeights = DEFAULT_WEIGHTS,
    ):
        self.discard_policy                 = discard_policy
        self.bot_opponent                   = bot_opponent
        self.bot_weights                    = bot_weights
        self.rng                            = random.Random(seed)
        self.fantasyland_eligible_next_hand = False
        self.fantasyland_card_count         = DEFAULT_FANTASYLAND_CARDS
        self.fantasyland_blocked_next_hand  = False
        self.hands_played                   = 0


class HandResult():
    def __init__(
            self,
            evaluations   : Dict[RowId, HandEvaluation],
            royalties     : BoardRoyalties,
            qualification : FantasylandQualification,
    ):
        self.evaluations   = evaluations
        self.royalties     = royalties
        self.qualification = qualification

    @property
    def fouled(self) -> bool:
        return self.royalties.fouled

    @property
    def total(self) -> int:
        return self.royalties.total

    def __repr__(self) -> str:
        return f'HandResult(fouled={self.fouled}, total={self.total})'

    def to_dict(self) -> dict:
        royalties = self.royalties.by_row()
        rows = {
            row_id.name: {
                'hand'     : self.evaluations[row_id].name,
                'tiebreak' : list(self.evaluations[row_id].tiebreak),
                'royalty'  : royalties[row_id],
            }
            for row_id in RowId
        }
        return {
            'fouled'      : self.fouled,
            'rows'        : rows,
            'total'       : self.total,
            'fantasyland' : {
                'eligible' : self.qualification.eligible,
                'cards'    : self.qualification.card_count,
            },
        }


class HandState():
    def __init__(self, context: MatchContext):
        self.context                = context
        self.deck                   = CardDeck(context.rng)
        self.boards                 = {player_id: Board() for player_id in PlayerId}
        self.pools: Dict[PlayerId, List[Card]] = {
            player_id: []
            for player_id in PlayerId
        }
        self.seat_streets           = {player_id: FIRST_STREET for player_id in PlayerId}
        self.phase                  = Phase.DEALING
        self.current_street_ids: Set[str] = set()
        self.street_start_count     = 0
        self.dealt_by_street: Dict[PlayerId, Dict[StreetKey, List[Card]]] = {
            player_id: {}
            for player_id in PlayerId
        }
        self.discarded_by_street: Dict[PlayerId, Dict[StreetKey, List[Card]]] = {
            player_id: {}
            for player_id in PlayerId
        }
        self.locked: Set[str]       = set()
        self.is_fantasyland         = False
        self.fantasyland_card_count = DEFAULT_FANTASYLAND_CARDS
        self.message                = ''
        self.status_type            = 'info'
        self.result: Optional[HandResult]          = None
        self.opponent_result: Optional[HandResult] = None
        self.score: Optional[ScoreResult]          = None

    def __repr__(self) -> str:
        return (
            '#######\n'
            f'Street {self.street} ({self.phase.name})\n'
            'Player board\n'
            f'{self.boards[PlayerId.player]}\n'
            f'Hand: {self.pools[PlayerId.player]}\n'
            '#######\n'
            'Opponent board\n'
            f'{self.boards[PlayerId.opponent]}\n'
            '#######'
        )

    @property
    def street(self) -> int:
        return self.seat_streets[PlayerId.player]

    @property
    def hand_finished(self) -> bool:
        return self.phase == Phase.HAND_COMPLETE

    @property
    def board(self) -> Board:
        return self.boards[PlayerId.player]

    @property
    def hand_cards(self) -> List[Card]:
        return self.pools[PlayerId.player]

    def street_key(self, player_id: PlayerId = PlayerId.player) -> StreetKey:
        if self.is_fantasyland:
            return FANTASYLAND_KEY

        return self.seat_streets[player_id]

    def place_quota(self, player_id: PlayerId) -> int:
        if self.is_fantasyland:
            return self.boards[player_id].open_slots()

        return STREET_REQUIREMENTS[self.seat_streets[player_id]].place

    def all_cards(self) -> List[Card]:
        cards = list(self.deck.cards)
        for player_id in PlayerId:
            cards.extend(self.pools[player_id])
            cards.extend(self.boards[player_id])
            for discarded in self.discarded_by_street[player_id].values():
                cards.extend(discarded)

        return cards

    def check_partition(self) -> bool:
        cards = self.all_cards()

        return len(cards) == 52 and len({card.card_id for card in cards}) == 52


# ---------------------------------------------------------------------------
# Status helpers
# ---------------------------------------------------------------------------

def _set_status(state: HandState, message: str, status_type: str = 'info'):
    state.message     = message
    state.status_type = status_type


def _reject(state: HandState, message: str) -> bool:
    logger.debug('Rejected: %s', message)
    _set_status(state, message, 'error')

    return False


def _find_in_pool(state: HandState, player_id: PlayerId, card_id: str) -> Optional[Card]:
    for card in state.pools[player_id]:
        if card.card_id == card_id:
            return card

    return None


# ---------------------------------------------------------------------------
# Dealing
# ---------------------------------------------------------------------------

def _deal_street(state: HandState, street: int):
    requirement = STREET_REQUIREMENTS[street]
    player_id   = PlayerId.player

    state.phase                  = Phase.DEALING
    dealt                        = state.deck.deal(requirement.deal)
    state.seat_streets[player_id] = street
    state.pools[player_id]       = dealt
    state.current_street_ids     = {card.card_id for card in dealt}
    state.street_start_count     = len(state.boards[player_id])
    state.dealt_by_street[player_id][street]     = list(dealt)
    state.discarded_by_street[player_id][street] = []
    state.phase                  = Phase.PLACING

    logger.info('Street %d dealt: %s', street, dealt)


def _start_fantasyland(state: HandState, card_count: int):
    player_id = PlayerId.player
    dealt     = state.deck.deal(card_count)

    state.is_fantasyland         = True
    state.fantasyland_card_count = card_count
    state.pools[player_id]       = dealt
    state.current_street_ids     = {card.card_id for card in dealt}
    state.street_start_count     = 0
    state.dealt_by_street[player_id][FANTASYLAND_KEY]     = list(dealt)
    state.discarded_by_street[player_id][FANTASYLAND_KEY] = []
    state.phase                  = Phase.FANTASYLAND_PLACING

    logger.info('Fantasyland hand with %d cards', card_count)
    _set_status(
        state,
        f'Fantasyland! Arrange all cards freely ({card_count} dealt).',
        'success'
    )


def _apply_opponent_move(state: HandState, move: BotMove):
    player_id = PlayerId.opponent
    board     = state.boards[player_id]
    street    = state.street_key(player_id)
    pool      = {card.card_id: card for card in state.pools[player_id]}

    for placement in move.placements:
        card = pool.get(placement.card_id)
        if card is None or board.is_row_full(placement.row):
            continue
        board.add_card(placement.row, card)
        del pool[placement.card_id]

    for card_id in move.burn_card_ids:
        card = pool.pop(card_id, None)
        if card is not None:
            state.discarded_by_street[player_id][street].append(card)

    state.pools[player_id] = list(pool.values())


def _play_opponent_street(state: HandState, street: int):
    player_id   = PlayerId.opponent
    requirement = STREET_REQUIREMENTS[street]
    dealt       = state.deck.deal(requirement.deal)

    state.seat_streets[player_id]                = street
    state.pools[player_id]                       = dealt
    state.dealt_by_street[player_id][street]     = list(dealt)
    state.discarded_by_street[player_id][street] = []

    _apply_opponent_move(state, choose_move_for(state, player_id))
    logger.info('Opponent played street %d', street)


def _play_opponent_fantasyland(state: HandState):
    # One-shot 13-card deal, set in full before the player's arrangement
    player_id = PlayerId.opponent
    dealt     = state.deck.deal(OPPONENT_FANTASYLAND_CARDS)

    state.pools[player_id]                                = dealt
    state.dealt_by_street[player_id][FANTASYLAND_KEY]     = list(dealt)
    state.discarded_by_street[player_id][FANTASYLAND_KEY] = []

    _apply_opponent_move(state, choose_move_for(state, player_id))
    logger.info('Opponent played Fantasyland')


def start_hand(context: MatchContext) -> HandState:
    """Deal a fresh hand: street 1, or the whole Fantasyland allotment."""
    state = HandState(context)
    context.hands_played += 1

    if context.fantasyland_blocked_next_hand:
        context.fantasyland_blocked_next_hand  = False
        context.fantasyland_eligible_next_hand = False
        context.fantasyland_card_count         = DEFAULT_FANTASYLAND_CARDS
        _deal_street(state, FIRST_STREET)
        _set_status(
            state,
            'Fantasyland cannot happen two hands in a row. '
            'Street 1: Place all 5 cards.'
        )
        return state

    if context.fantasyland_eligible_next_hand:
        context.fantasyland_eligible_next_hand = False
        _start_fantasyland(state, context.fantasyland_card_count)
        if context.bot_opponent:
            _play_opponent_fantasyland(state)
        return state

    _deal_street(state, FIRST_STREET)
    _set_status(state, 'New hand started. Street 1: Place all 5 cards.')

    return state


# ---------------------------------------------------------------------------
# Card movement
# ---------------------------------------------------------------------------

def can_move_card(state: HandState, card_id: str) -> bool:
    return (
        not state.hand_finished and
        card_id in state.current_street_ids and
        card_id not in state.locked
    )


def place_card(state: HandState, card_id: str, row: RowId) -> bool:
    if state.hand_finished:
        return _reject(state, 'Hand is complete.')

    card = _find_in_pool(state, PlayerId.player, card_id)
    if card is None or not can_move_card(state, card_id):
        return _reject(state, f'Card {card_id} is not in your hand.')

    board = state.boards[PlayerId.player]
    if board.is_row_full(row):
        return _reject(state, f'{ROW_LABELS[row]} row is full.')

    state.pools[PlayerId.player].remove(card)
    board.add_card(row, card)

    return True


def move_card_between_rows(state: HandState, card_id: str, row: RowId) -> bool:
    if state.hand_finished:
        return _reject(state, 'Hand is complete.')

    board          = state.boards[PlayerId.player]
    source_row, _  = board.locate(card_id)
    if source_row is None:
        return _reject(state, f'Card {card_id} is not on the board.')

    if not can_move_card(state, card_id):
        return _reject(state, f'Card {card_id} is locked.')

    if source_row == row:
        return True

    if board.is_row_full(row):
        return _reject(state, f'{ROW_LABELS[row]} row is full.')

    _, card = board.remove_card(card_id)
    board.add_card(row, card)

    return True


def return_card_to_pool(state: HandState, card_id: str) -> bool:
    if state.hand_finished:
        return _reject(state, 'Hand is complete.')

    board         = state.boards[PlayerId.player]
    source_row, _ = board.locate(card_id)
    if source_row is None:
        return _reject(state, f'Card {card_id} is not on the board.')

    if not can_move_card(state, card_id):
        return _reject(state, f'Card {card_id} is locked.')

    _, card = board.remove_card(card_id)
    state.pools[PlayerId.player].append(card)

    return True


def _discard_allowance(state: HandState) -> int:
    if state.is_fantasyland:
        return max(0, state.fantasyland_card_count - BOARD_SIZE)

    return STREET_REQUIREMENTS[state.street].discard


def discard_card(state: HandState, card_id: str) -> bool:
    if state.hand_finished:
        return _reject(state, 'Hand is complete.')

    if not can_move_card(state, card_id):
        return _reject(state, f'Card {card_id} cannot be discarded this street.')

    player_id = PlayerId.player
    discarded = state.discarded_by_street[player_id][state.street_key()]
    allowance = _discard_allowance(state)
    if len(discarded) >= allowance:
        if state.is_fantasyland:
            return _reject(state, 'No more cards can be burned this hand.')
        return _reject(
            state,
            f'Street {state.street} allows {allowance} discard(s).'
        )

    card = _find_in_pool(state, player_id, card_id)
    if card is not None:
        state.pools[player_id].remove(card)
    else:
        _, card = state.boards[player_id].remove_card(card_id)

    discarded.append(card)
    state.current_street_ids.discard(card_id)

    return True


def apply_move(state: HandState, player_id: PlayerId, move: BotMove) -> bool:
    """Apply a bot decision to a seat.

    The player seat goes through the same checks as manual input, and
    stops at the first rejected card.
    """
    if player_id == PlayerId.opponent:
        _apply_opponent_move(state, move)
        return True

    for placement in move.placements:
        if not place_card(state, placement.card_id, placement.row):
            return False

    for card_id in move.burn_card_ids:
        if not discard_card(state, card_id):
            return False

    return True


# ---------------------------------------------------------------------------
# Street transitions
# ---------------------------------------------------------------------------

def street_progress(state: HandState) -> Tuple[int, int]:
    """Cards placed and discarded so far on the current street."""
    player_id = PlayerId.player
    discarded = state.discarded_by_street[player_id].get(state.street_key(), [])
    placed    = len(state.boards[player_id]) - state.street_start_count

    return placed, len(discarded)


def validate_advance(state: HandState) -> Optional[str]:
    player_id = PlayerId.player
    board     = state.boards[player_id]
    pool      = state.pools[player_id]

    if state.is_fantasyland:
        if not board.is_complete():
            return f'Fantasyland requires a complete board ({BOARD_SIZE} placed cards).'
        return None

    requirement       = STREET_REQUIREMENTS[state.street]
    placed, discarded = street_progress(state)

    if placed != requirement.place:
        return (
            f'Street {state.street} needs: {requirement.text}. '
            f'Current: placed {placed}, discarded {discarded}.'
        )

    if state.context.discard_policy == DiscardPolicy.explicit:
        if discarded != requirement.discard or pool:
            return (
                f'Street {state.street} needs: {requirement.text}. '
                f'Current: placed {placed}, discarded {discarded}.'
            )
    elif len(pool) + discarded != requirement.discard:
        return (
            f'Street {state.street} still has {len(pool)} card(s) in hand; '
            f'expected {requirement.discard - discarded} before auto-discard.'
        )

    if state.street == FINAL_STREET and not board.is_complete():
        return f'Hand cannot end: board is not complete ({BOARD_SIZE} cards).'

    return None


def _lock_street(state: HandState):
    state.locked.update(state.current_street_ids)
    state.current_street_ids = set()


def advance_street(state: HandState) -> bool:
    if state.hand_finished:
        return _reject(state, 'Hand is already complete.')

    error = validate_advance(state)
    if error is not None:
        return _reject(state, error)

    player_id = PlayerId.player

    if state.is_fantasyland:
        burned = state.discarded_by_street[player_id][FANTASYLAND_KEY]
        burned.extend(state.pools[player_id])
        state.pools[player_id] = []
        _lock_street(state)
        _finish_hand(state)
        return True

    street = state.street
    state.phase = Phase.STREET_COMPLETE
    # Whatever is left in the pool is the street's discard
    state.discarded_by_street[player_id][street].extend(state.pools[player_id])
    state.pools[player_id] = []
    _lock_street(state)

    if state.context.bot_opponent:
        _play_opponent_street(state, street)

    if street == FINAL_STREET:
        _finish_hand(state)
        return True

    _deal_street(state, street + 1)
    _set_status(
        state,
        f'Advanced to Street {street + 1}. '
        f'Requirement: {STREET_REQUIREMENTS[street + 1].text}.',
        'success'
    )

    return True


# ---------------------------------------------------------------------------
# Finalization
# ---------------------------------------------------------------------------

def evaluate_final_result(
        state     : HandState,
        player_id : PlayerId = PlayerId.player
) -> HandResult:
    evaluations = state.boards[player_id].evaluate()
    royalties   = royalties_from_evaluations(evaluations)

    return HandResult(
        evaluations   = evaluations,
        royalties     = royalties,
        qualification = fantasyland_qualification(
            evaluations[RowId.top],
            royalties.fouled
        ),
    )


def _update_fantasyland(state: HandState):
    context       = state.context
    qualification = state.result.qualification

    if state.is_fantasyland:
        context.fantasyland_blocked_next_hand  = True
        context.fantasyland_eligible_next_hand = False
        if qualification.eligible:
            _set_status(
                state,
                'Hand complete. Fantasyland cannot happen two hands in a row.'
            )
        else:
            _set_status(state, 'Hand complete.', 'success')
        return

    if qualification.eligible:
        context.fantasyland_eligible_next_hand = True
        context.fantasyland_card_count         = qualification.card_count
        logger.info('Qualified for Fantasyland with %d cards', qualification.card_count)
        _set_status(
            state,
            'Hand complete. Qualified for Fantasyland next hand '
            f'({qualification.card_count} cards).',
            'success'
        )
        return

    context.fantasyland_eligible_next_hand = False
    context.fantasyland_card_count         = DEFAULT_FANTASYLAND_CARDS
    _set_status(state, 'Hand complete.', 'success')


def _finish_hand(state: HandState):
    if state.result is not None:
        raise RuntimeError('Hand result is already set')

    state.result = evaluate_final_result(state, PlayerId.player)
    opponent_board = state.boards[PlayerId.opponent]
    if opponent_board.is_complete():
        state.opponent_result = evaluate_final_result(state, PlayerId.opponent)
        state.score           = score_hand(state.boards[PlayerId.player], opponent_board)

    state.phase = Phase.HAND_COMPLETE
    _update_fantasyland(state)

    logger.info(
        'Hand finished: fouled=%s royalties=%d score=%s',
        state.result.fouled, state.result.total, state.score
    )
