"""Letters on a ring of hexagons; drag across them to spell words."""
