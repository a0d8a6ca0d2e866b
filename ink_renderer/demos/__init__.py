"""Command-line demos for the ink renderer."""
