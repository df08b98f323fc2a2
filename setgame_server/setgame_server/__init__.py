"""Set game rules server: card algebra, match search and event replay."""

__version__ = "0.1.0"
