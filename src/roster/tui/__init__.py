"""Terminal UI for Roster."""

from .app import RosterApp

__all__ = ["RosterApp"]
