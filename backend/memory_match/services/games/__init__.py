"""Game domain services: deck, turn state, scoring and the reveal timer.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""

from .deck import Card, InvalidDeckError, default_cards, shuffle, validate_deck
from .session import COMPLETED, IN_PROGRESS, NOT_STARTED, GameSession
