"""Grid raycaster: first-person view and minimap over a 2D grid of colored cells."""
