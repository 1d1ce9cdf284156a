"""Discord bot that answers ``[[card name]]`` mentions with Scryfall data."""

__version__ = "1.0.0"
