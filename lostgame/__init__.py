"""A small side-scrolling platform game: tile maps, a jumping hero and walking enemies."""

__version__ = "0.1.0"
__all__ = ["base", "enemy", "player", "game"]