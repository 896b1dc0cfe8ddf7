"""Identity infrastructure: accounts, passwords and tokens."""
