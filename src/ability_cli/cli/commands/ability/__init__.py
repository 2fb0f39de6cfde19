"""Commands operating on individual abilities: list, get, run, exists, can-run, validate."""
