import random
from typing import Dict, Iterable, List, Optional, Set

from .deck import Card, shuffle, validate_deck
from .scoring import compute_score

NOT_STARTED = 'not_started'
IN_PROGRESS = 'in_progress'
COMPLETED = 'completed'


class GameSession:
    """Turn state of one memory game.

    The session is mutated serially by request handlers and by the deferred
    clear task. Selecting the second card issues a clear token; the task
    hands it back to ``clear_selection`` after the reveal cooldown. Tokens
    from a previous game never clear the current one.
    """

    def __init__(self, cards: Iterable[Card], require_name: bool = True,
                 player_name: Optional[str] = None, rng: Optional[random.Random] = None):
        self._card_set: List[Card] = validate_deck(cards)
        self._by_id: Dict[int, Card] = {c.id: c for c in self._card_set}
        self._rng = rng
        self.require_name = require_name
        self.total_pairs = len(self._card_set) // 2
        self.epoch = 0
        self._next_token = 0
        self._reset()
        if player_name is not None or not require_name:
            self.start_game(player_name)

    def _reset(self) -> None:
        self.deck: List[Card] = shuffle(self._card_set, self._rng)
        self.selected: List[Card] = []
        self.matched_pair_ids: Set[int] = set()
        self.attempts = 0
        self.score = 0
        self.player_name: Optional[str] = None
        self.pending_token: Optional[int] = None
        self.status = NOT_STARTED

    def start_game(self, player_name: Optional[str] = None) -> None:
        if self.status != NOT_STARTED:
            raise ValueError('Game has already started')
        name = (player_name or '').strip()
        if self.require_name and not name:
            raise ValueError('Player name is required')
        self.player_name = name or None
        self.status = IN_PROGRESS

    def start_new_game(self, player_name: Optional[str] = None) -> None:
        """Reshuffle and reset. Valid from any state.

        With name entry the next game waits for ``start_game``. Without it
        the next game starts at once under the given name, or the previous
        one.
        """
        previous_name = self.player_name
        self.epoch += 1
        self._reset()
        if not self.require_name:
            self.player_name = (player_name or '').strip() or previous_name
            self.status = IN_PROGRESS

    def get_card(self, card_id: int) -> Optional[Card]:
        return self._by_id.get(card_id)

    def select_card(self, card_id: int) -> bool:
        """Reveal a card. Returns False when the click is ignored."""
        card = self._by_id.get(card_id)
        if card is None or self.status != IN_PROGRESS:
            return False
        if len(self.selected) == 2 or card in self.selected \
                or card.pair_id in self.matched_pair_ids:
            return False

        self.selected.append(card)
        if len(self.selected) == 2:
            self.attempts += 1
            first, second = self.selected
            if first.pair_id == second.pair_id:
                self.matched_pair_ids.add(first.pair_id)
            self._next_token += 1
            self.pending_token = self._next_token
            if self.is_complete():
                self.status = COMPLETED
                self.score = self.compute_score()
        return True

    def clear_selection(self, token: int) -> bool:
        """Flip pending cards back. Stale tokens are ignored."""
        if token is None or token != self.pending_token:
            return False
        self.selected = []
        self.pending_token = None
        return True

    def is_revealed(self, card_id: int) -> bool:
        card = self._by_id.get(card_id)
        if card is None:
            return False
        return card in self.selected or card.pair_id in self.matched_pair_ids

    def is_complete(self) -> bool:
        return len(self.matched_pair_ids) == self.total_pairs

    def compute_score(self) -> int:
        return compute_score(self.total_pairs, self.attempts)

    def to_dict(self):
        cards = []
        for card in self.deck:
            revealed = self.is_revealed(card.id)
            cards.append({
                'id': card.id,
                'revealed': revealed,
                'matched': card.pair_id in self.matched_pair_ids,
                'text': card.text if revealed else None,
            })
        return {
            'status': self.status,
            'player_name': self.player_name,
            'attempts': self.attempts,
            'score': self.score,
            'total_pairs': self.total_pairs,
            'matched_pairs': len(self.matched_pair_ids),
            'selected': [c.id for c in self.selected],
            'cards': cards,
            'completed': self.status == COMPLETED,
        }
