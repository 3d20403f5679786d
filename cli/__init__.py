"""FB2SCI command line interface."""
