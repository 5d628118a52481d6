"""URL helpers — query string parsing for navigation."""
