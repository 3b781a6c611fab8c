"""Domain layer: models, errors and domain name normalization.

Nothing here knows about HTTP, DNS or the terminal.
"""
