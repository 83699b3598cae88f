"""
Custom exceptions raised by the EtherealVault application.
"""


class EtherealVaultError(Exception):
    """Base exception for all EtherealVault errors."""

    pass


class ProcessingError(EtherealVaultError):
    """Error raised while the application is processing."""

    pass
