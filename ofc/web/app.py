import os
import uuid
import logging

from flask import Flask, request, jsonify

from ofc.engine.board import Board, RowId
from ofc.engine.bot import choose_move_for
from ofc.engine.cards import parse_card
from ofc.engine.scoring import score_hand
from ofc.engine.state import (
    DiscardPolicy, MatchContext, Phase, PlayerId,
    start_hand, place_card, move_card_between_rows, return_card_to_pool,
    discard_card, advance_street, can_move_card, street_progress,
)
from ofc.engine.streets import STREET_REQUIREMENTS


logger = logging.getLogger(__name__)

app = Flask(__name__)

# Seed for every new match; unset means a fresh random seed per match
SEED = os.environ.get('OFC_SEED')
DISCARD_POLICY = DiscardPolicy[os.environ.get('OFC_DISCARD_POLICY', 'remaining_card')]

# In-memory match store: game_id -> {'context': MatchContext, 'state': HandState}
games = {}


def card_to_dict(card, state=None):
    data = {
        'id':     card.card_id,
        'code':   card.code,
        'symbol': card.symbol,
        'height': card.height,
        'suit':   card.suit.name,
    }
    if state is not None:
        data['movable'] = can_move_card(state, card.card_id)
    return data


def board_to_dict(board, state=None):
    return {
        row_id.name: [card_to_dict(c, state) for c in board.rows[row_id]]
        for row_id in RowId
    }


def hidden_board_to_dict(board):
    return {
        row_id.name: [{'hidden': True} for _ in board.rows[row_id]]
        for row_id in RowId
    }


def street_history(state, player_id=PlayerId.player):
    dealt     = state.dealt_by_street[player_id]
    discarded = state.discarded_by_street[player_id]
    return [
        {
            'street':    key,
            'dealt':     [card.code for card in cards],
            'discarded': [card.code for card in discarded.get(key, [])],
        }
        for key, cards in dealt.items()
    ]


def build_response(game_id, game):
    state   = game['state']
    context = game['context']
    placed, discarded = street_progress(state)
    opponent_board    = state.boards[PlayerId.opponent]
    if state.phase == Phase.FANTASYLAND_PLACING:
        ai_board = hidden_board_to_dict(opponent_board)
    else:
        ai_board = board_to_dict(opponent_board)
    if state.is_fantasyland:
        requirement = f'Place 13, burn {state.fantasyland_card_count - 13}'
    else:
        requirement = STREET_REQUIREMENTS[state.street].text

    resp = {
        'game_id':        game_id,
        'phase':          state.phase.name.lower(),
        'street':         state.street,
        'requirement':    requirement,
        'progress':       {'placed': placed, 'discarded': discarded},
        'is_fantasyland': state.is_fantasyland,
        'player_board':   board_to_dict(state.boards[PlayerId.player], state),
        'ai_board':       ai_board,
        'history':        street_history(state),
        'cards':          [card_to_dict(c, state) for c in state.pools[PlayerId.player]],
        'message':        state.message,
        'status':         state.status_type,
        'fantasyland_next_hand': {
            'eligible': context.fantasyland_eligible_next_hand,
            'cards':    context.fantasyland_card_count,
            'blocked':  context.fantasyland_blocked_next_hand,
        },
    }

    if state.hand_finished:
        resp['result'] = state.result.to_dict()
        if state.opponent_result is not None:
            resp['ai_result'] = state.opponent_result.to_dict()
        if state.score is not None:
            resp['score'] = state.score.to_dict()

    return resp


def _new_context():
    seed = int(SEED) if SEED is not None else None
    return MatchContext(discard_policy=DISCARD_POLICY, seed=seed)


def _load_game(data):
    game_id = data.get('game_id') if isinstance(data, dict) else None
    if not isinstance(game_id, str) or game_id not in games:
        return game_id, None
    return game_id, games[game_id]


def _parse_row(name):
    try:
        return RowId[name]
    except (KeyError, TypeError):
        return None


def _run_mutator(mutator, *args):
    data = request.get_json(force=True, silent=True) or {}
    game_id, game = _load_game(data)
    if game is None:
        return jsonify({'error': 'Game not found'}), 404

    card_id = data.get('card_id')
    if not isinstance(card_id, str):
        return jsonify({'error': 'card_id is required'}), 400

    extra   = []
    for name in args:
        row = _parse_row(data.get(name))
        if row is None:
            return jsonify({'error': f'Invalid row: {data.get(name)!r}'}), 400
        extra.append(row)

    state = game['state']
    if not mutator(state, card_id, *extra):
        return jsonify({'error': state.message}), 400

    return jsonify(build_response(game_id, game))


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.route('/api/new_game', methods=['POST'])
def new_game():
    game_id = str(uuid.uuid4())
    context = _new_context()
    games[game_id] = {'context': context, 'state': start_hand(context)}
    logger.info('New game %s', game_id)

    return jsonify(build_response(game_id, games[game_id]))


@app.route('/api/new_hand', methods=['POST'])
def new_hand():
    data = request.get_json(force=True, silent=True) or {}
    game_id, game = _load_game(data)
    if game is None:
        return jsonify({'error': 'Game not found'}), 404

    game['state'] = start_hand(game['context'])
    return jsonify(build_response(game_id, game))


@app.route('/api/state/<game_id>', methods=['GET'])
def get_state(game_id):
    if game_id not in games:
        return jsonify({'error': 'Game not found'}), 404

    return jsonify(build_response(game_id, games[game_id]))


@app.route('/api/place', methods=['POST'])
def place():
    return _run_mutator(place_card, 'row')


@app.route('/api/move', methods=['POST'])
def move():
    return _run_mutator(move_card_between_rows, 'row')


@app.route('/api/return', methods=['POST'])
def return_to_hand():
    return _run_mutator(return_card_to_pool)


@app.route('/api/discard', methods=['POST'])
def discard():
    return _run_mutator(discard_card)


@app.route('/api/advance', methods=['POST'])
def advance():
    data = request.get_json(force=True, silent=True) or {}
    game_id, game = _load_game(data)
    if game is None:
        return jsonify({'error': 'Game not found'}), 404

    state = game['state']
    if not advance_street(state):
        return jsonify({'error': state.message}), 400

    return jsonify(build_response(game_id, game))


@app.route('/api/hint', methods=['POST'])
def hint():
    data = request.get_json(force=True, silent=True) or {}
    game_id, game = _load_game(data)
    if game is None:
        return jsonify({'error': 'Game not found'}), 404

    state = game['state']
    if state.hand_finished:
        return jsonify({'error': 'Hand is complete.'}), 400

    suggestion = choose_move_for(state, PlayerId.player)
    return jsonify({
        'placements': [
            {'card_id': p.card_id, 'row': p.row.name}
            for p in suggestion.placements
        ],
        'burn_card_ids': suggestion.burn_card_ids,
    })


def _board_from_payload(payload):
    return Board.from_rows(*(
        [parse_card(code) for code in payload[row_id.name]]
        for row_id in RowId
    ))


def _check_distinct(*boards):
    codes = [card.code for board in boards for card in board]
    repeated = sorted({code for code in codes if codes.count(code) > 1})
    if repeated:
        raise ValueError(f'cards used more than once: {" ".join(repeated)}')


@app.route('/api/score', methods=['POST'])
def score():
    data = request.get_json(force=True, silent=True) or {}
    try:
        board_a = _board_from_payload(data['board_a'])
        board_b = _board_from_payload(data['board_b'])
        _check_distinct(board_a, board_b)
        result  = score_hand(board_a, board_b)
    except (KeyError, TypeError, ValueError) as exc:
        return jsonify({'error': f'Invalid boards: {exc}'}), 400

    return jsonify(result.to_dict())


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
