"""Additional CLI commands registered on the main app."""
