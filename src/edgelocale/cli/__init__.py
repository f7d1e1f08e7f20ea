"""edgelocale command-line interface."""
