"""Command-line entry point for sampling the CPU thermal sensor."""
