"""Command-line front end: registry, dispatcher, help and built-in commands."""
