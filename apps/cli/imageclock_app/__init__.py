"""ImageClock command-line application."""
