from .app import AppConfig
from .catalog import Catalog

__all__ = ["AppConfig", "Catalog"]
