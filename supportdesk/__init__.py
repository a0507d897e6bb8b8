"""Customer registration, ticket lifecycle and notification fan-out."""
