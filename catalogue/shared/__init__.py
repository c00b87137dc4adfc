"""
Comfort Catalogue Shared Kernel
===============================

UI-independent logic used by the showroom front end.

Architecture:
- core: EventBus, configuration, logging, task scopes, errors
- infrastructure: the remote spreadsheet endpoint gateway
- domain: products, catalog access, mutations, display settings, auth
"""

__version__ = "1.0.0"

__all__ = []
