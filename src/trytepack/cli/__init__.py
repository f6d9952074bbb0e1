"""Command-line interface for trytepack."""
