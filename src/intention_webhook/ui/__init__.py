"""Caller-side controllers for the settings page and the intention widget."""

from .settings import SettingsController
from .widget import IntentionWidget

__all__ = [
    "IntentionWidget",
    "SettingsController",
]
