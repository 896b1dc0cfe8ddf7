"""Deck infrastructure: persistence and routes for decks and cards."""
