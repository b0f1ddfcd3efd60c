"""Predicate building, pagination and execution for professor queries."""
