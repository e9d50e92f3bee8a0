"""Pure functions with no I/O."""
