"""
Shared Infrastructure Module
=============================

Technical adapters for external systems (the remote catalogue endpoint).
"""

from catalogue.shared.infrastructure.remote import Action, RemoteGateway

__all__ = [
    "Action",
    "RemoteGateway",
]
