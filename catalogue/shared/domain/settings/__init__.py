from .store import SaveResult, SettingsStore

__all__ = ["SaveResult", "SettingsStore"]
