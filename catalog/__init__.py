"""Product catalog HTTP service."""
