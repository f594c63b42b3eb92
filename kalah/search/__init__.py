"""Adversarial search for the computer opponent."""

from .minimax import MIN_LEVEL, SearchConfig, SearchResult, depth_for_level, search_best_pit

__all__ = ["MIN_LEVEL", "SearchConfig", "SearchResult", "depth_for_level", "search_best_pit"]
