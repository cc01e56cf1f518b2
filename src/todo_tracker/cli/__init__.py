"""Console entrypoint, composition root and menu commands."""
