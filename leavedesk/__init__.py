"""Leavedesk: API autenticada de perfiles de personal y licencias."""

__version__ = "0.1.0"
