"""Application layer: composition root, error hooks and reporters."""
