"""Agent runtime - configuration, background workers and the CLI entry point."""
