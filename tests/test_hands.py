"""
Tests for cards, hand evaluation, royalties, Fantasyland qualification
and head-to-head scoring.
"""

import itertools
import random

import pytest

from ofc.engine.board import Board, RowId, ROW_CAPACITY, is_foul
from ofc.engine.cards import (
    Card, CardDeck, InsufficientCards, Suit, HEIGHTS, full_deck, parse_card, parse_cards,
)
from ofc.engine.evaluator import (
    HandEvaluation, HandRank, HAND_RANK_NAMES,
    compare, compare_tiebreaks, evaluate_five, evaluate_three, evaluate_row,
)
from ofc.engine.fantasyland import (
    board_fantasyland_qualification, fantasyland_qualification,
)
from ofc.engine.royalties import (
    BOTTOM_ROYALTIES, MIDDLE_ROYALTIES,
    board_royalties, bottom_royalty, middle_royalty, top_royalty,
)
from ofc.engine.scoring import ScoringInvariantViolation, score_hand


# ============================================================
# Helper utilities
# ============================================================

def c(spec: str) -> Card:
    """Build a Card from a spec like 'As', 'Td', '2h'."""
    return parse_card(spec)


def five(specs: str) -> HandEvaluation:
    return evaluate_five(parse_cards(specs))


def three(specs: str) -> HandEvaluation:
    return evaluate_three(parse_cards(specs))


def make_board(top: str, middle: str, bottom: str) -> Board:
    return Board.from_rows(parse_cards(top), parse_cards(middle), parse_cards(bottom))


# Rows used across the scoring tests
TOP_HC_ACE    = 'As 9h 4c'
TOP_HC_KING   = 'Kd 9d 3c'
TOP_PAIR_6    = '6s 6h 2c'
TOP_TRIPS_2   = '2s 2h 2d'

MID_PAIR      = 'Ks Kh 8c 5d 2s'
MID_TWO_PAIR  = 'As Ah 7c 7d 3s'
MID_TRIPS     = '9s 9h 9d 4c 2d'
MID_STRAIGHT  = '5s 6h 7c 8d 9s'

BOT_TWO_PAIR  = 'Qs Qh Jc Jd 2h'
BOT_STRAIGHT  = '6s 7h 8c 9d Ts'
BOT_FLUSH     = 'Ah Jh 8h 5h 2h'
BOT_FULL      = '4s 4h 4d Kc Kd'
BOT_SF        = '9c Tc Jc Qc Kc'


# ============================================================
# Card
# ============================================================

class TestCard:
    def test_values_run_from_two_to_ace(self):
        assert [Card(Suit.s, h).value for h in HEIGHTS] == list(range(2, 15))

    def test_repr_is_code(self):
        assert repr(Card(Suit.h, 'K')) == 'Kh'
        assert repr(Card(Suit.d, '2')) == '2d'

    def test_symbol(self):
        assert Card(Suit.s, 'A').symbol == 'A♠'

    def test_equality_uses_identity(self):
        assert Card(Suit.s, 'A', 'x') != Card(Suit.s, 'A', 'y')
        assert Card(Suit.s, 'A', 'x') == Card(Suit.h, 'K', 'x')

    def test_default_identity_is_code(self):
        assert Card(Suit.s, 'A') == c('As')
        assert len({c('As'), c('As'), c('Ah')}) == 2

    def test_cards_are_immutable(self):
        card = c('As')
        with pytest.raises(AttributeError):
            card.height = 'K'

    def test_invalid_height_raises(self):
        with pytest.raises(ValueError):
            Card(Suit.s, '1')

    def test_parse_ten_alias(self):
        assert parse_card('10h').height == 'T'

    def test_parse_symbol_suit(self):
        card = parse_card('Q♠')
        assert card.suit == Suit.s and card.value == 12

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_card('Zz')
        with pytest.raises(ValueError):
            parse_card('A')

    def test_sorted_by_value(self):
        cards = parse_cards('As 2s Ks')
        assert [card.height for card in sorted(cards)] == ['2', 'K', 'A']


# ============================================================
# CardDeck
# ============================================================

class TestCardDeck:
    def test_deck_has_52_distinct_cards(self):
        deck = CardDeck()
        assert len(deck) == 52
        assert len({(card.suit, card.height) for card in deck.cards}) == 52
        assert len({card.card_id for card in deck.cards}) == 52

    def test_deal_removes_from_front(self):
        deck  = CardDeck(random.Random(1))
        front = deck.cards[:5]
        assert deck.deal(5) == front
        assert len(deck) == 47

    def test_deals_partition_the_deck(self):
        deck     = CardDeck(random.Random(7))
        original = set(deck.cards)
        hands    = [deck.deal(n) for n in (5, 3, 3, 3, 3, 5, 3, 16)]

        seen = set()
        for hand in hands:
            assert not seen.intersection(hand)
            seen.update(hand)
        assert not seen.intersection(deck.cards)
        assert seen.union(deck.cards) == original

    def test_deal_too_many_raises(self):
        deck = CardDeck()
        deck.deal(50)
        with pytest.raises(InsufficientCards):
            deck.deal(3)
        assert len(deck) == 2

    def test_insufficient_cards_is_value_error(self):
        assert issubclass(InsufficientCards, ValueError)

    def test_draw_from_empty_deck_raises(self):
        deck = CardDeck()
        deck.deal(52)
        with pytest.raises(InsufficientCards):
            deck.draw_card()

    def test_same_seed_same_order(self):
        assert CardDeck(random.Random(3)).cards == CardDeck(random.Random(3)).cards

    def test_shuffle_keeps_cards(self):
        deck   = CardDeck(random.Random(5))
        before = set(deck.cards)
        deck.shuffle()
        assert set(deck.cards) == before

    def test_shuffle_uses_deck_rng(self):
        expected = full_deck()
        random.Random(3).shuffle(expected)
        assert CardDeck(random.Random(3)).cards == expected


# ============================================================
# Hand evaluation: 5-card rows
# ============================================================

class TestEvaluateFive:
    def test_straight_flush(self):
        e = five('9s 8s 7s 6s 5s')
        assert e.rank == HandRank.STRAIGHT_FLUSH
        assert e.tiebreak == (9,)

    def test_steel_wheel(self):
        e = five('As 2s 3s 4s 5s')
        assert e.rank == HandRank.STRAIGHT_FLUSH
        assert e.tiebreak == (5,)

    def test_four_of_a_kind(self):
        e = five('As Ah Ad Ac 2s')
        assert e.rank == HandRank.FOUR_OF_A_KIND
        assert e.tiebreak == (14, 2)

    def test_full_house(self):
        e = five('Ks Kh Kd As Ah')
        assert e.rank == HandRank.FULL_HOUSE
        assert e.tiebreak == (13, 14)

    def test_flush(self):
        e = five('2s 9s 4s Js 7s')
        assert e.rank == HandRank.FLUSH
        assert e.tiebreak == (11, 9, 7, 4, 2)

    def test_straight_ace_high(self):
        e = five('As Kh Qd Jc Ts')
        assert e.rank == HandRank.STRAIGHT
        assert e.tiebreak == (14,)

    def test_wheel_is_five_high_straight(self):
        wheel = five('As 2h 3d 4c 5s')
        assert wheel.rank == HandRank.STRAIGHT
        assert wheel.tiebreak == (5,)
        assert compare(wheel, five('2s 3h 4d 5c 6s')) == -1

    def test_ace_is_not_low_elsewhere(self):
        assert five('Ks As 2h 3d 4c').rank == HandRank.HIGH_CARD

    def test_three_of_a_kind(self):
        e = five('As Ah Ad 2s 3h')
        assert e.rank == HandRank.THREE_OF_A_KIND
        assert e.tiebreak == (14, 3, 2)

    def test_two_pairs(self):
        e = five('2s 2h Ks Kh As')
        assert e.rank == HandRank.TWO_PAIRS
        assert e.tiebreak == (13, 2, 14)

    def test_one_pair(self):
        e = five('4d As 7h 4s Jc')
        assert e.rank == HandRank.ONE_PAIR
        assert e.tiebreak == (4, 14, 11, 7)

    def test_high_card(self):
        e = five('2s Kh Qd Jc 9h')
        assert e.rank == HandRank.HIGH_CARD
        assert e.tiebreak == (13, 12, 11, 9, 2)

    def test_wrong_size_raises(self):
        with pytest.raises(ValueError):
            evaluate_five(parse_cards('As Kh Qd'))

    def test_invariant_under_permutation(self):
        for specs in ('As 2h 3d 4c 5s', 'Ks Kh Kd As Ah', '4d As 7h 4s Jc', '2s 9s 4s Js 7s'):
            cards    = parse_cards(specs)
            expected = evaluate_five(cards)
            for order in itertools.permutations(cards):
                got = evaluate_five(list(order))
                assert (got.rank, got.tiebreak) == (expected.rank, expected.tiebreak)


# ============================================================
# Hand evaluation: 3-card rows
# ============================================================

class TestEvaluateThree:
    def test_three_of_a_kind(self):
        e = three('2s 2h 2d')
        assert e.rank == HandRank.THREE_OF_A_KIND
        assert e.tiebreak == (2,)

    def test_one_pair(self):
        e = three('Qs 2d Qh')
        assert e.rank == HandRank.ONE_PAIR
        assert e.tiebreak == (12, 2)

    def test_high_card(self):
        e = three('Qs As Kh')
        assert e.rank == HandRank.HIGH_CARD
        assert e.tiebreak == (14, 13, 12)

    def test_no_flush_or_straight(self):
        assert three('Qs Ks As').rank == HandRank.HIGH_CARD

    def test_evaluate_row_dispatches_on_size(self):
        assert evaluate_row(parse_cards('Qs Qh 2d')).rank == HandRank.ONE_PAIR
        assert evaluate_row(parse_cards('Qs Qh Qd 2d 2c')).rank == HandRank.FULL_HOUSE
        with pytest.raises(ValueError):
            evaluate_row(parse_cards('Qs Qh 2d 3c'))


# ============================================================
# Comparisons
# ============================================================

class TestCompare:
    HANDS = [
        'As Ks Qs Js Ts', 'As Ah Ad Ac 2s', 'Ks Kh Kd As Ah',
        '2s 4s 6s 8s Ts', '9s 8h 7d 6c 5s', 'As Ah Ad 2s 3h',
        'As Ah Ks Kh 2s', 'As Ah Ks Kh 3s', 'Ks Kh As 3d 2c',
        'Ks Kh Qs 3d 2c', 'As Ks Qh Jd 9c', 'As Ks Qh Jd 8c',
    ]

    def test_category_order(self):
        assert five('As Ks Qs Js Ts') > five('As Ah Ad Ac 2s')
        assert five('As Ah Ad Ac 2s') > five('As Ah Ad Ks Kh')
        assert five('As Ah Ad Ks Kh') > five('2s 4s 6s 8s Ts')
        assert five('2s 4s 6s 8s Ts') > five('As Kh Qd Jc Ts')
        assert five('9s 8h 7d 6c 5s') > five('As Ah Ad 2s 3h')
        assert five('As Ah Ad 2s 3h') > five('As Ah Ks Kh 2s')
        assert five('As Ah Ks Kh 2s') > five('As Ah 2s 3h 4d')
        assert five('As Ah 2s 3h 4d') > five('As Ks Qh Jd 9c')

    def test_kickers_break_ties(self):
        assert compare(five('Ks Kh As 3d 2c'), five('Ks Kh Qs 3d 2c')) == 1
        assert compare(five('As Ah Ks Kh 2s'), five('As Ah Ks Kh 3s')) == -1

    def test_same_hand_different_suits_ties(self):
        assert compare(five('As Ks Qh Jd 9c'), five('Ah Kh Qd Jc 9s')) == 0
        assert five('As Ks Qh Jd 9c') == five('Ah Kh Qd Jc 9s')

    def test_antisymmetric(self):
        evaluations = [five(specs) for specs in self.HANDS]
        for a, b in itertools.product(evaluations, repeat=2):
            assert compare(a, b) == -compare(b, a)

    def test_three_against_five(self):
        # Top row pair of aces beats a middle pair of kings
        assert compare(three('As Ah 2d'), five('Ks Kh 8c 5d 3s')) == 1
        # Middle pair of aces with kickers beats a top pair of aces
        assert compare(five('As Ah Kc 5d 3s'), three('Ad Ac 2d')) == 1

    def test_missing_tiebreak_positions_count_as_zero(self):
        assert compare_tiebreaks((5,), (5, 0)) == 0
        assert compare_tiebreaks((5, 1), (5,)) == 1

    def test_rank_names_cover_every_category(self):
        assert set(HAND_RANK_NAMES) == set(HandRank)
        assert five('As Kh Qd Jc Ts').name == 'Straight'


# ============================================================
# Board
# ============================================================

class TestBoard:
    def test_capacities(self):
        assert ROW_CAPACITY == {RowId.top: 3, RowId.middle: 5, RowId.bottom: 5}

    def test_overflow_raises(self):
        board = Board()
        for spec in ('As', 'Ks', 'Qs'):
            board.add_card(RowId.top, c(spec))
        with pytest.raises(ValueError):
            board.add_card(RowId.top, c('Js'))
        assert len(board.top) == 3

    def test_complete_board(self):
        board = make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR)
        assert board.is_complete()
        assert len(board) == 13
        assert board.open_slots() == 0

    def test_incomplete_board_cannot_be_evaluated(self):
        board = Board()
        board.add_card(RowId.top, c('As'))
        with pytest.raises(ValueError):
            board.evaluate()

    def test_locate_and_remove(self):
        board = make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR)
        assert board.locate('Kh')[0] == RowId.middle
        row_id, card = board.remove_card('Kh')
        assert row_id == RowId.middle and card == c('Kh')
        assert board.locate('Kh') == (None, -1)

    def test_copy_is_independent(self):
        board = Board()
        board.add_card(RowId.bottom, c('As'))
        clone = board.copy()
        clone.add_card(RowId.bottom, c('Ks'))
        assert len(board.bottom) == 1

    def test_valid_board_not_foul(self):
        assert not make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR).is_foul()

    def test_middle_above_bottom_is_foul(self):
        assert make_board(TOP_HC_ACE, MID_TWO_PAIR, 'Ks Kh 8c 5d 2s').is_foul()

    def test_top_above_middle_is_foul(self):
        assert make_board('As Ah Kd', MID_PAIR, BOT_FULL).is_foul()

    def test_same_pair_with_better_kickers_below_is_not_foul(self):
        board = make_board('Ks Kh 2d', 'Kd Kc 2s 3h 4c', BOT_FLUSH)
        assert not board.is_foul()


# ============================================================
# Royalties
# ============================================================

class TestTopRoyalty:
    @pytest.mark.parametrize('specs, expected', [
        ('6s 6h 2d', 1),
        ('9s 9h 2d', 4),
        ('As Ah 2d', 9),
        ('2s 2h 2d', 10),
        ('7s 7h 7d', 15),
        ('As Ah Ad', 22),
        ('5s 5h Ad', 0),
        ('As Kh Qd', 0),
    ])
    def test_top_royalty(self, specs, expected):
        assert top_royalty(three(specs)) == expected


class TestMiddleRoyalty:
    @pytest.mark.parametrize('specs, expected', [
        (MID_TRIPS, 2),
        (MID_STRAIGHT, 4),
        (BOT_FLUSH, 8),
        (BOT_FULL, 12),
        ('As Ah Ad Ac 2s', 20),
        (BOT_SF, 30),
        (MID_TWO_PAIR, 0),
        (MID_PAIR, 0),
    ])
    def test_middle_royalty(self, specs, expected):
        assert middle_royalty(five(specs)) == expected


class TestBottomRoyalty:
    @pytest.mark.parametrize('specs, expected', [
        (BOT_STRAIGHT, 2),
        (BOT_FLUSH, 4),
        (BOT_FULL, 6),
        ('As Ah Ad Ac 2s', 10),
        (BOT_SF, 15),
        (MID_TRIPS, 0),
        (BOT_TWO_PAIR, 0),
    ])
    def test_bottom_royalty(self, specs, expected):
        assert bottom_royalty(five(specs)) == expected


class TestBoardRoyalties:
    def test_tables_are_exhaustive(self):
        assert set(MIDDLE_ROYALTIES) == set(HandRank)
        assert set(BOTTOM_ROYALTIES) == set(HandRank)

    def test_valid_board_sums_rows(self):
        royalties = board_royalties(make_board(TOP_PAIR_6, '5s 6d 7c 8d 9s', BOT_FLUSH))
        assert not royalties.fouled
        assert (royalties.top, royalties.middle, royalties.bottom) == (1, 4, 4)
        assert royalties.total == 9

    def test_fouled_board_scores_nothing(self):
        # Trips up top over a weaker middle, with a flush underneath
        royalties = board_royalties(make_board('As Ah Ad', MID_TRIPS, BOT_FLUSH))
        assert royalties.fouled
        assert royalties.total == 0
        assert royalties.by_row() == {RowId.top: 0, RowId.middle: 0, RowId.bottom: 0}

    def test_pure(self):
        board = make_board(TOP_PAIR_6, MID_TRIPS, BOT_SF)
        assert board_royalties(board) == board_royalties(board)


# ============================================================
# Fantasyland
# ============================================================

class TestFantasyland:
    @pytest.mark.parametrize('specs, cards', [
        ('Qs Qh 2d', 13),
        ('Ks Kh 2d', 14),
        ('As Ah 2d', 15),
        ('2s 2h 2d', 16),
        ('7s 7h 7d', 16),
    ])
    def test_qualifying_tops(self, specs, cards):
        qualification = fantasyland_qualification(three(specs), fouled=False)
        assert qualification.eligible
        assert qualification.card_count == cards

    @pytest.mark.parametrize('specs', ['Js Jh Ad', '6s 6h 2d', 'As Kh Qd'])
    def test_non_qualifying_tops(self, specs):
        qualification = fantasyland_qualification(three(specs), fouled=False)
        assert not qualification.eligible
        assert qualification.card_count is None

    def test_fouled_board_never_qualifies(self):
        assert not fantasyland_qualification(three('As Ah Ad'), fouled=True).eligible

    def test_board_with_queens_on_top(self):
        board = make_board('Qs Qh 2d', 'Ks Kh 8c 5d 3s', 'As Ad Jc Jd 4h')
        qualification = board_fantasyland_qualification(board)
        assert qualification.eligible and qualification.card_count == 13

    def test_fouled_board_with_queens_on_top(self):
        board = make_board('Qs Qh 2d', 'Js Jh 8c 5d 3s', BOT_FLUSH)
        assert is_foul(board.evaluate())
        assert not board_fantasyland_qualification(board).eligible


# ============================================================
# Head-to-head scoring
# ============================================================

class TestScoreHand:
    def test_identical_boards_tie(self):
        result = score_hand(
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
        )
        assert set(result.row_outcomes.values()) == {0}
        assert result.points_a == 0
        assert result.points_b == 0

    def test_win_top_only(self):
        result = score_hand(
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_HC_KING, MID_PAIR, BOT_TWO_PAIR),
        )
        assert result.row_outcomes == {RowId.top: 1, RowId.middle: 0, RowId.bottom: 0}
        assert result.points_a == 1

    def test_win_bottom_with_royalty(self):
        result = score_hand(
            make_board(TOP_HC_ACE, MID_PAIR, BOT_STRAIGHT),
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
        )
        assert result.royalties_a == 2
        assert result.points_a == 3

    def test_mixed_lines(self):
        result = score_hand(
            make_board(TOP_HC_ACE, MID_PAIR, BOT_FULL),
            make_board(TOP_HC_KING, MID_TWO_PAIR, BOT_FULL),
        )
        assert result.row_outcomes == {RowId.top: 1, RowId.middle: -1, RowId.bottom: 0}
        assert result.scoop_bonus == 0
        assert result.points_a == 0

    def test_scoop_with_royalties(self):
        result = score_hand(
            make_board(TOP_PAIR_6, MID_TRIPS, BOT_SF),
            make_board(TOP_HC_KING, MID_PAIR, BOT_TWO_PAIR),
        )
        assert result.scoop_bonus == 3
        assert result.royalties_a == 18
        assert result.royalties_b == 0
        assert result.points_a == 24
        assert result.points_b == -24

    def test_opponent_scoop(self):
        result = score_hand(
            make_board(TOP_HC_KING, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_PAIR_6, MID_TRIPS, BOT_SF),
        )
        assert result.scoop_bonus == -3
        assert result.points_a == -24

    def test_a_fouls(self):
        result = score_hand(
            make_board(TOP_TRIPS_2, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
        )
        assert result.foul_a and not result.foul_b
        assert set(result.row_outcomes.values()) == {-1}
        assert result.points_a == -3
        assert result.points_b == 3
        assert result.points_a + result.points_b == 0

    def test_b_fouls_no_royalty_credit(self):
        result = score_hand(
            make_board(TOP_HC_ACE, MID_STRAIGHT, BOT_FLUSH),
            make_board(TOP_TRIPS_2, MID_PAIR, BOT_TWO_PAIR),
        )
        assert result.foul_b
        assert result.royalties_a == 0
        assert result.royalties_b == 0
        assert result.scoop_bonus == 0
        assert result.points_a == 3

    def test_both_foul(self):
        result = score_hand(
            make_board(TOP_TRIPS_2, MID_PAIR, BOT_TWO_PAIR),
            make_board('As Ah Kd', MID_PAIR, BOT_FULL),
        )
        assert result.foul_a and result.foul_b
        assert set(result.row_outcomes.values()) == {0}
        assert (result.royalties_a, result.royalties_b, result.scoop_bonus) == (0, 0, 0)
        assert result.points_a == 0 and result.points_b == 0

    def test_royalty_differential(self):
        result = score_hand(
            make_board(TOP_HC_KING, MID_STRAIGHT, BOT_FLUSH),
            make_board(TOP_PAIR_6, MID_PAIR, BOT_FULL),
        )
        # top: K high loses to 66, middle: straight wins, bottom: flush loses
        assert result.row_outcomes == {RowId.top: -1, RowId.middle: 1, RowId.bottom: -1}
        assert result.royalties_a == 8
        assert result.royalties_b == 7
        assert result.points_a == 0

    def test_zero_sum_across_boards(self):
        boards = [
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_PAIR_6, MID_TRIPS, BOT_SF),
            make_board(TOP_TRIPS_2, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_HC_KING, MID_STRAIGHT, BOT_FLUSH),
        ]
        for a, b in itertools.product(boards, repeat=2):
            result = score_hand(a, b)
            assert result.points_a == -result.points_b
            assert score_hand(b, a).points_a == result.points_b

    def test_incomplete_board_rejected(self):
        with pytest.raises(ValueError):
            score_hand(Board(), make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR))

    def test_invariant_error_type(self):
        assert issubclass(ScoringInvariantViolation, RuntimeError)

    def test_to_dict(self):
        result = score_hand(
            make_board(TOP_PAIR_6, MID_TRIPS, BOT_SF),
            make_board(TOP_HC_KING, MID_PAIR, BOT_TWO_PAIR),
        )
        data = result.to_dict()
        assert data['rows'] == {'top': 1, 'middle': 1, 'bottom': 1}
        assert data['points_a'] == 24
        assert data['line_points_a'] == 6
        assert data['breakdown'][0] == {
            'row': 'top', 'outcome': 1, 'hand_a': 'One Pair', 'hand_b': 'High Card',
        }
        assert data['breakdown'][2]['hand_a'] == 'Straight Flush'
        assert 'Board A scoops: +3.' in data['notes']
        assert 'Royalties: A +18, B +0, net to A 18.' in data['notes']

    def test_foul_note(self):
        result = score_hand(
            make_board(TOP_TRIPS_2, MID_PAIR, BOT_TWO_PAIR),
            make_board(TOP_HC_ACE, MID_PAIR, BOT_TWO_PAIR),
        )
        assert result.notes == [
            'Board A fouled: it loses every line and no royalties are paid.'
        ]
        assert result.to_dict()['breakdown'][1]['hand_a'] == 'One Pair'

    def test_both_foul_note(self):
        result = score_hand(
            make_board(TOP_TRIPS_2, MID_PAIR, BOT_TWO_PAIR),
            make_board('As Ah Kd', MID_PAIR, BOT_FULL),
        )
        assert result.notes == ['Both boards fouled: 0-0 with no scoop and no royalties.']

    def test_no_scoop_note_on_split(self):
        result = score_hand(
            make_board(TOP_HC_ACE, MID_PAIR, BOT_FULL),
            make_board(TOP_HC_KING, MID_TWO_PAIR, BOT_FULL),
        )
        assert not any('scoops' in note for note in result.notes)
