"""Command-line interface for skillroute."""
