"""Orders infrastructure."""
