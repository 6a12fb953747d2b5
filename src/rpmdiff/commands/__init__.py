"""Command implementations invoked by the rpmdiff CLI."""
