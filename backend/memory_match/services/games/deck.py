import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional


class InvalidDeckError(ValueError):
    """Raised when a card set cannot form a playable deck."""


@dataclass(frozen=True)
class Card:
    id: int
    pair_id: int
    text: str

    def to_dict(self):
        return {
            'id': self.id,
            'pairId': self.pair_id,
            'text': self.text,
        }


DEFAULT_CARD_TEXTS = ['🍎', '🚀', '🐱', '🎸', '🌵', '⚽', '🍕', '🦉']


def default_cards() -> List[Card]:
    """Two cards per label, ids in deal order."""
    cards = []
    for pair_id, text in enumerate(DEFAULT_CARD_TEXTS, start=1):
        cards.append(Card(id=len(cards), pair_id=pair_id, text=text))
        cards.append(Card(id=len(cards), pair_id=pair_id, text=text))
    return cards


def cards_from_payload(items) -> List[Card]:
    """Build cards from ``[{id, pairId, text}]`` as sent by clients."""
    if not isinstance(items, list):
        raise InvalidDeckError('cards must be a list')
    cards = []
    for item in items:
        if not isinstance(item, dict):
            raise InvalidDeckError('each card must be an object')
        try:
            card_id = item['id']
            pair_id = item.get('pairId', item.get('pair_id'))
            text = str(item.get('text', ''))
        except KeyError:
            raise InvalidDeckError('each card needs an id')
        if not isinstance(card_id, int) or not isinstance(pair_id, int) \
                or isinstance(card_id, bool) or isinstance(pair_id, bool):
            raise InvalidDeckError('card id and pairId must be integers')
        cards.append(Card(id=card_id, pair_id=pair_id, text=text))
    return cards


def validate_deck(cards: Iterable[Card]) -> List[Card]:
    """Return the cards as a list, or raise InvalidDeckError.

    A deck is playable when it is non-empty, ids are unique and every
    pair id is shared by exactly two cards (which also makes the size even).
    """
    cards = list(cards)
    if not cards:
        raise InvalidDeckError('deck is empty')
    if len(cards) % 2:
        raise InvalidDeckError(f'deck has an odd number of cards ({len(cards)})')
    ids = Counter(c.id for c in cards)
    dupes = sorted(i for i, n in ids.items() if n > 1)
    if dupes:
        raise InvalidDeckError(f'duplicate card ids: {dupes}')
    pairs = Counter(c.pair_id for c in cards)
    unpaired = sorted(p for p, n in pairs.items() if n != 2)
    if unpaired:
        raise InvalidDeckError(f'pair ids not shared by exactly two cards: {unpaired}')
    return cards


def shuffle(cards: Iterable[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a uniformly shuffled copy of ``cards`` (Fisher-Yates)."""
    deck = list(cards)
    (rng or random).shuffle(deck)
    return deck
