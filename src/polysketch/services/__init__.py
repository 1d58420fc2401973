"""Services for polysketch."""

from polysketch.services.export import ExportService
from polysketch.services.workspace import DrawingWorkspace

__all__ = ["DrawingWorkspace", "ExportService"]
