"""Decks domain: decks and their cards."""
