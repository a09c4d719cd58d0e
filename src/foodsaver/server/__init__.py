"""ASGI application factory and dependencies for the FoodSaver API."""

from foodsaver.server.app import app, create_app

__all__ = ["app", "create_app"]
