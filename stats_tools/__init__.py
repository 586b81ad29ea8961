"""Report loading, trend tables and the command-line entry point."""
