"""Generic directed graphs stored as adjacency lists."""
