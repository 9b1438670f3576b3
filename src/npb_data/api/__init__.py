from .search import search_players

__all__ = ["search_players"]
