"""Identity domain: users and authentication rules."""
