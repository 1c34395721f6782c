"""
Preferences module.

Per-user pin and recency state, and the cross-team ranking reads.

Public API:
- IPreferenceService: Interface for preference operations
- Preference, PinResponse, TouchToolRequest: Data models
- Preference exceptions
"""

from .interfaces import IPreferenceService
from .models import Preference, PinResponse, TouchToolRequest
from .exceptions import InvalidLimitError, ForeignPreferenceError

__all__ = [
    "IPreferenceService",
    "Preference",
    "PinResponse",
    "TouchToolRequest",
    "InvalidLimitError",
    "ForeignPreferenceError",
]
