from typing import List, Optional

from ofc.engine.board import RowId
from ofc.engine.bot import HeuristicPlayer, Player
from ofc.engine.state import (
    HandState, MatchContext, PlayerId, advance_street, apply_move, start_hand,
)


class GameLoop():
    """Plays whole hands with ``player`` in the human seat.

    The opponent seat is always the engine's own bot, so the context must
    have ``bot_opponent`` enabled for hands to be scored.
    """

    def __init__(
            self,
            player  : Optional[Player] = None,
            context : Optional[MatchContext] = None,
            verbose : bool = True,
    ):
        self.player  = player if player is not None else HeuristicPlayer()
        self.context = context if context is not None else MatchContext()
        self.verbose = verbose
        self.states: List[HandState] = []

    def _compute_and_print_result(self, state: HandState):
        if not self.verbose:
            return

        h1 = state.boards[PlayerId.player]
        h2 = state.boards[PlayerId.opponent]
        r1 = state.result
        r2 = state.opponent_result
        print()
        if state.is_fantasyland:
            print(f'Fantasyland hand ({state.fantasyland_card_count} cards)')
        for row_id in RowId:
            line = (
                f'{" ".join(repr(card) for card in h1.rows[row_id]):15} '
                f'{r1.evaluations[row_id].name:15} '
                f'{r1.royalties.by_row()[row_id]}'
            )
            if r2 is not None:
                line += (
                    f' | {" ".join(repr(card) for card in h2.rows[row_id]):15} '
                    f'{r2.evaluations[row_id].name:15} '
                    f'{r2.royalties.by_row()[row_id]}'
                )
            print(line)
        if r1.fouled:
            print('Player fouled')
        if r2 is not None and r2.fouled:
            print('Opponent fouled')
        if state.score is not None:
            print('Scores:', state.score.points_a, state.score.points_b)
        print(state.message)

    def play_hand(self) -> HandState:
        state = start_hand(self.context)
        self.states.append(state)

        while not state.hand_finished:
            move = self.player.get_play(state, PlayerId.player)
            if not apply_move(state, PlayerId.player, move) or \
               not advance_street(state):
                raise RuntimeError(f'Player made an illegal move: {state.message}')
            if self.verbose and not state.hand_finished:
                print(state)

        self._compute_and_print_result(state)

        return state

    def run(self, n_hands: int = 1) -> int:
        """Play ``n_hands`` hands and return the player's net points."""
        total = 0
        for _ in range(n_hands):
            state = self.play_hand()
            if state.score is not None:
                total += state.score.points_a

        if self.verbose:
            print('Net points:', total)

        return total
