"""Application Commands."""

from disposal.application.classify.commands.classify_waste import ClassifyWasteCommand

__all__ = ["ClassifyWasteCommand"]
