"""HTTP routes for the ranker API."""
