"""Application wiring for the photo-search client."""
