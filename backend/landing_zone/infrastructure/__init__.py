"""Infrastructure Layer — logging setup and the coordinate lookup."""
