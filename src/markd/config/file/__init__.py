from .settings import ConfigStoreSettings
from .store import FileConfigStore

__all__ = ["ConfigStoreSettings", "FileConfigStore"]
