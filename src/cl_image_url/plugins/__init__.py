"""Parameter builder plugins."""
