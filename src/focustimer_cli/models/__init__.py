"""Domain models for focustimer."""
