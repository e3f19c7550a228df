"""Navigation infrastructure: config sources."""
