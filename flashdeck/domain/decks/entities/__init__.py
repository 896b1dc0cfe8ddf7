from .card import Card
from .deck import Deck, DeckSummary

__all__ = ["Card", "Deck", "DeckSummary"]
