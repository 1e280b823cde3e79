"""Collaborators that live beside the form engine.

``AuthService`` is imported from ``formstate.services.auth`` directly; it
builds on the form controller, which itself imports this package.
"""

from formstate.services.event_bus import FormEventBus
from formstate.services.session_store import SessionStore

__all__ = ["FormEventBus", "SessionStore"]
