from .app import Application, TOOL_NAME
from .exceptions import EtherealVaultError, ProcessingError

__all__ = ["Application", "TOOL_NAME", "EtherealVaultError", "ProcessingError"]
