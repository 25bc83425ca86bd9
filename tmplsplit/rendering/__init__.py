"""Template rendering, data loading and output writing."""
