"""Study infrastructure: progress persistence, queries and routes."""
