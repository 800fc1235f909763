"""Projection exports."""

from .projector import JsonObject, Projector

__all__ = ["JsonObject", "Projector"]
