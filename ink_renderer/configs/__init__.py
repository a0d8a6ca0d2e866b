"""Configuration modules for the ink renderer."""
