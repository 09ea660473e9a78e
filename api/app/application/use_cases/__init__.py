"""
Casos de uso de la aplicacion.
"""
from .erp_sync_use_cases import ErpSyncUseCases

__all__ = ["ErpSyncUseCases"]
