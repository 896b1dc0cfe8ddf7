"""Decks application module."""
