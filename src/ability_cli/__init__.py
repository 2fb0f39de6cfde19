"""Command-line front-end for abilities registered through a host's Abilities API."""
