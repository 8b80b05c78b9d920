"""StarDots endpoint specs and adapters, one module per operation."""
