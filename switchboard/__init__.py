"""Switchboard: deterministic intent and workflow classification.

Maps a field-service user's free-text request to an intent or a multi-step
workflow, extracts typed entities, and builds the system prompt for the
downstream reasoning step from declared business context.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
