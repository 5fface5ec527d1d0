"""Log aggregation reports."""
