"""Domain models for linked game data."""
