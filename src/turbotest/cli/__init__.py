"""Command-line host for the test controller."""
