"""Study domain: card mastery, study sessions and progress aggregation."""
