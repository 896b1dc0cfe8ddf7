"""Password hashing and token services for the identity module."""
