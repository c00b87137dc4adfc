"""
Remote Interface - the spreadsheet endpoint gateway.
"""

from catalogue.shared.infrastructure.remote.gateway import (
    Action,
    FETCH_FAILED_MESSAGE,
    RemoteGateway,
)

__all__ = [
    "Action",
    "FETCH_FAILED_MESSAGE",
    "RemoteGateway",
]
