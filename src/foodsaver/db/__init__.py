"""Persistence layer for FoodSaver."""

from .repository import get_engine, get_session, reset_repository_state, session_scope

__all__ = ["get_engine", "get_session", "reset_repository_state", "session_scope"]
