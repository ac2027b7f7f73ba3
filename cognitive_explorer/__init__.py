"""Cognitive Services Explorer: request builders and view models for Azure Cognitive Services."""

__version__ = "1.0.0"
