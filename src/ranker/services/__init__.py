"""Read operations composed from the query core."""
