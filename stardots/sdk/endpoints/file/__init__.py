"""File endpoints."""
