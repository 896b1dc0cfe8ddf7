"""Study application module: recording sessions and reading progress."""
