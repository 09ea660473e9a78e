"""
AuditLogger - Bitacora estructurada de sincronizaciones.

Cada corrida de sync deja una linea JSON en logs/sync_logs/sync_<fecha>.log:
- entidad, resultado (success / error), registros sincronizados y purgados
- categoria de error y status HTTP cuando falla

Nunca se registran credenciales ni el contenido de los registros.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger


class AuditLogger:
    """
    Gestor de la bitacora de sincronizaciones.

    Uso:
        # Al inicio de la app
        AuditLogger.initialize()

        # Al terminar una sync
        AuditLogger.log_sync("SalesInvoice", succeeded=True, synced=12)
    """

    BASE_LOG_DIR = Path("logs")
    SYNC_LOG_DIR = BASE_LOG_DIR / "sync_logs"

    FILE_TIMESTAMP_FORMAT = "%Y-%m-%d"
    LOG_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

    CONTEXT = "sync_audit"

    _initialized: bool = False
    _sink_id: Optional[int] = None

    @classmethod
    def initialize(cls) -> None:
        """
        Crea la carpeta y registra el sink de loguru.
        Debe llamarse al inicio de la aplicacion (o del script CLI).
        """
        if cls._initialized:
            return

        cls.SYNC_LOG_DIR.mkdir(parents=True, exist_ok=True)

        today = datetime.now().strftime(cls.FILE_TIMESTAMP_FORMAT)
        sync_log_file = cls.SYNC_LOG_DIR / f"sync_{today}.log"

        cls._sink_id = logger.add(
            str(sync_log_file),
            format="{message}",
            filter=lambda record: record["extra"].get("context") == cls.CONTEXT,
            rotation="1 day",
            retention="30 days",
            level="INFO"
        )

        cls._initialized = True
        logger.info("AuditLogger inicializado")

    @classmethod
    def shutdown(cls) -> None:
        """Quita el sink (util en tests y al cerrar la app)."""
        if cls._sink_id is not None:
            logger.remove(cls._sink_id)
        cls._sink_id = None
        cls._initialized = False

    @classmethod
    def build_entry(
        cls,
        entity: Optional[str],
        *,
        succeeded: bool,
        synced: int = 0,
        purged: int = 0,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Arma la entrada de bitacora (sin escribirla)."""
        entry: Dict[str, Any] = {
            "timestamp": datetime.now().strftime(cls.LOG_TIMESTAMP_FORMAT),
            "entity": entity,
            "result": "success" if succeeded else "error",
            "synced": synced,
            "purged": purged,
        }
        if error_code:
            entry["error_code"] = error_code
        if status_code is not None:
            entry["status_code"] = status_code
        if message:
            entry["message"] = message
        return entry

    @classmethod
    def log_sync(cls, entity: Optional[str], **kwargs: Any) -> Dict[str, Any]:
        """
        Registra el resultado de una sincronizacion.

        Si initialize() no se llamo, la entrada igual pasa por loguru
        (sin archivo dedicado).
        """
        entry = cls.build_entry(entity, **kwargs)
        logger.bind(context=cls.CONTEXT).info(json.dumps(entry, default=str))
        return entry
