"""Web API layer for polysketch."""

from polysketch.web.controllers import WorkspaceController
from polysketch.web.router import create_router

__all__ = ["WorkspaceController", "create_router"]
