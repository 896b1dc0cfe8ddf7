"""Flashdeck: flashcard decks, study sessions and progress tracking."""
