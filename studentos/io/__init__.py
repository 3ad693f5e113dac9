"""Persistence for computed match results."""

from studentos.io.match_store import MatchStore, matches_to_frame

__all__ = ["MatchStore", "matches_to_frame"]
