"""Runtime helpers for the bootstrap entry point."""
