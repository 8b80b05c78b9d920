"""Space endpoints."""
