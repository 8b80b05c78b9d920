"""Runtime components."""
