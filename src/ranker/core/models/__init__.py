"""Pydantic models for search criteria and responses."""
