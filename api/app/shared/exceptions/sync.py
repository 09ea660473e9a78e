"""
Excepciones del motor de sincronizacion SAP -> almacen local.

Cada excepcion sabe renderizar su propio cuerpo JSON (to_payload) para que
el handler HTTP no tenga que conocer cada categoria de error.
"""
from typing import Any, Dict, List, Optional

from app.shared.exceptions.base import AppException


class SyncException(AppException):
    """Excepcion base para errores del flujo de sincronizacion."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "SYNC_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details
        )

    def to_payload(self) -> Dict[str, Any]:
        """Cuerpo JSON que recibe el cliente HTTP."""
        return {"error": self.message}


class _EntitySelectionException(SyncException):
    """Errores corregibles por el cliente: incluyen la lista de entidades validas."""

    def __init__(self, message: str, error_code: str, available_entities: List[str]):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details={"available_entities": list(available_entities)}
        )
        self.available_entities = list(available_entities)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "availableEntities": self.available_entities,
        }


class InvalidSyncRequestException(_EntitySelectionException):
    """El request no trae nombre de entidad."""

    def __init__(self, available_entities: List[str]):
        super().__init__(
            message="El parametro 'entity' es obligatorio",
            error_code="INVALID_SYNC_REQUEST",
            available_entities=available_entities,
        )


class UnknownEntityException(_EntitySelectionException):
    """La entidad solicitada no esta registrada."""

    def __init__(self, entity_name: str, available_entities: List[str]):
        super().__init__(
            message=(
                f"Entidad desconocida: {entity_name}. "
                f"Entidades disponibles: {', '.join(available_entities)}"
            ),
            error_code="UNKNOWN_ENTITY",
            available_entities=available_entities,
        )
        self.entity_name = entity_name


class UpstreamConfigurationException(SyncException):
    """Faltan las credenciales de SAP en el entorno."""

    def __init__(self, message: str = "Credenciales de SAP no configuradas"):
        super().__init__(
            message=message,
            status_code=500,
            error_code="UPSTREAM_NOT_CONFIGURED",
        )


class UpstreamRequestException(SyncException):
    """
    SAP respondio con un status no exitoso (o un cuerpo ilegible).

    Conserva el status y el cuerpo original para diagnostico; el endpoint
    responde con ese mismo status.
    """

    def __init__(self, status_code: int, body: str, reason: str = ""):
        message = f"Fallo la consulta OData a SAP: {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(
            message=message,
            status_code=status_code,
            error_code="UPSTREAM_REQUEST_FAILED",
            details={"body": body},
        )
        self.body = body

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.body}


class PurgeFailedException(SyncException):
    """
    Fallo un borrado durante la purga previa al insert.

    El almacen queda con un subconjunto de los registros anteriores y no se
    inserta nada nuevo.
    """

    def __init__(self, entity_name: str, deleted_count: int, total: int, cause: str):
        super().__init__(
            message=(
                f"Fallo la purga de {entity_name} tras borrar "
                f"{deleted_count} de {total} registros"
            ),
            status_code=500,
            error_code="PURGE_FAILED",
            details={"deleted": deleted_count, "total": total},
        )
        self.entity_name = entity_name
        self.deleted_count = deleted_count
        self.total = total
        self.cause = cause


class PersistenceException(SyncException):
    """Fallo el bulk insert en el almacen local."""

    def __init__(self, entity_name: str, cause: str):
        super().__init__(
            message=f"No se pudieron guardar los registros de {entity_name}",
            status_code=500,
            error_code="PERSISTENCE_FAILED",
        )
        self.entity_name = entity_name
        self.cause = cause
