"""Command line and reporting tools."""
