"""
Shared Core Module
==================

Event system, configuration, logging, task scopes and the error hierarchy.
"""

# Event System
from .event_bus import EventBus, EventPayload, Subscription
from . import events

# Errors
from .errors import CatalogueError, ConfigurationError, RemoteCallError, ValidationError

# Task scopes
from .task_scope import ScopedResult, TaskScope

# Configuration
from .configuration import (
    AppConfig,
    ConfigManager,
    LoggingConfig,
    RemoteConfig,
    UIConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)
from .logging_config import setup_logging

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "Subscription",
    "events",
    # Errors
    "CatalogueError",
    "ConfigurationError",
    "RemoteCallError",
    "ValidationError",
    # Task scopes
    "ScopedResult",
    "TaskScope",
    # Configuration
    "AppConfig",
    "ConfigManager",
    "LoggingConfig",
    "RemoteConfig",
    "UIConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
    "setup_logging",
]
