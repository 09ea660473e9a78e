"""
Casos de uso de sincronizacion SAP -> almacen local.

Flujo lineal por invocacion (cualquier paso puede abortar):
validar -> resolver entidad -> credenciales -> leer SAP -> transformar
-> [purgar] -> bulk insert -> resultado

Nada se reintenta: cada error termina la invocacion.
"""
import asyncio
from typing import Any, Callable, List, Optional

from loguru import logger

from app.domain.entities.entity_mapping import EntityMapping, EntityMappingRegistry
from app.domain.entities.sync import (
    RawUpstreamRecord,
    StoredRecord,
    SyncRequest,
    SyncResult,
    UpstreamCredentials,
)
from app.domain.repositories.entity_store import IEntityStore
from app.infrastructure.external.sap_odata.credentials import load_upstream_credentials
from app.infrastructure.external.sap_odata.odata_client import ODataQuery, SapODataClient
from app.infrastructure.external.sap_odata.transformer import transform_records
from app.shared.exceptions.sync import (
    InvalidSyncRequestException,
    PersistenceException,
    PurgeFailedException,
    SyncException,
    UpstreamConfigurationException,
)
from app.shared.utils.audit_logger import AuditLogger

CredentialsProvider = Callable[[], Optional[UpstreamCredentials]]


class ErpSyncUseCases:
    """
    Orquestador de sincronizacion por entidad.

    Una instancia por request: recibe el almacen (ligado a la sesion de DB),
    el registro de entidades y el cliente OData ya construidos.
    """

    def __init__(
        self,
        store: IEntityStore,
        registry: EntityMappingRegistry,
        client: SapODataClient,
        credentials_provider: CredentialsProvider = load_upstream_credentials,
    ):
        self.store = store
        self.registry = registry
        self.client = client
        self.credentials_provider = credentials_provider

    def list_entities(self) -> List[str]:
        """Entidades sincronizables, en orden de registro."""
        return self.registry.list_names()

    async def sync_entity(self, request: SyncRequest) -> SyncResult:
        """
        Sincroniza una entidad completa desde SAP.

        Con purge_existing=True y datos nuevos, borra uno a uno los registros
        locales existentes antes de insertar. Si un borrado falla, la purga
        queda a medias y no se inserta nada.

        Raises:
            SyncException: cualquier categoria de error del flujo
        """
        try:
            result = await self._run_sync(request)
        except SyncException as e:
            logger.error(f"Sync {request.entity_name or '<sin entidad>'} fallo [{e.error_code}]: {e.message}")
            AuditLogger.log_sync(
                request.entity_name,
                succeeded=False,
                error_code=e.error_code,
                status_code=e.status_code,
            )
            raise

        AuditLogger.log_sync(
            result.entity_name,
            succeeded=True,
            synced=result.record_count,
            purged=result.purged_count,
            message=result.message,
        )
        return result

    async def fetch_raw(
        self,
        entity_name: Optional[str],
        query: Optional[ODataQuery] = None,
    ) -> List[RawUpstreamRecord]:
        """
        Lectura ad-hoc de SAP para una entidad, sin transformar ni guardar.
        Mismas validaciones y errores que sync_entity.
        """
        mapping = self._resolve(entity_name)
        credentials = self._require_credentials()
        return await self._fetch(mapping, credentials, query)

    async def list_local_records(self, entity_name: Optional[str]) -> List[StoredRecord]:
        """Lectura directa del almacen local (sin transformacion)."""
        mapping = self._resolve(entity_name)
        return await self.store.list(mapping.logical_name)

    async def _run_sync(self, request: SyncRequest) -> SyncResult:
        mapping = self._resolve(request.entity_name)
        entity_name = mapping.logical_name
        logger.info(
            f"Iniciando sync {entity_name} "
            f"({mapping.service_namespace}/{mapping.resource_collection}, "
            f"purge={request.purge_existing})"
        )

        credentials = self._require_credentials()
        raw_records = await self._fetch(mapping, credentials)

        if not raw_records:
            # Sin datos nuevos no se purga: se conserva lo que haya localmente
            logger.info(f"SAP no devolvio registros de {entity_name}")
            return SyncResult(
                entity_name=entity_name,
                record_count=0,
                succeeded=True,
                message="SAP no devolvio datos",
            )

        records = transform_records(raw_records, mapping.field_map)

        purged = 0
        if request.purge_existing:
            purged = await self._purge(entity_name)

        try:
            await self.store.bulk_insert(entity_name, records)
        except Exception as e:
            logger.error(f"bulk_insert de {entity_name} fallo: {e}")
            raise PersistenceException(entity_name, str(e)) from e

        message = f"Se sincronizaron {len(records)} registros de {entity_name} desde SAP"
        logger.success(message)
        return SyncResult(
            entity_name=entity_name,
            record_count=len(records),
            succeeded=True,
            message=message,
            purged_count=purged,
        )

    def _resolve(self, entity_name: Any) -> EntityMapping:
        name = entity_name.strip() if isinstance(entity_name, str) else ""
        if not name:
            raise InvalidSyncRequestException(self.registry.list_names())
        return self.registry.resolve(name)

    def _require_credentials(self) -> UpstreamCredentials:
        credentials = self.credentials_provider()
        if credentials is None:
            raise UpstreamConfigurationException()
        return credentials

    async def _fetch(
        self,
        mapping: EntityMapping,
        credentials: UpstreamCredentials,
        query: Optional[ODataQuery] = None,
    ) -> List[RawUpstreamRecord]:
        # requests es bloqueante: se ejecuta en un thread para no frenar el event loop
        records = await asyncio.to_thread(
            self.client.fetch,
            mapping.service_namespace,
            mapping.resource_collection,
            credentials,
            query,
        )
        logger.info(f"SAP devolvio {len(records)} registro(s) de {mapping.logical_name}")
        return records

    async def _purge(self, entity_name: str) -> int:
        """
        Borra los registros existentes de a uno, esperando cada borrado.

        No es atomico: ante un fallo quedan confirmados los borrados previos.
        """
        try:
            existing = await self.store.list(entity_name)
        except Exception as e:
            logger.error(f"Purga de {entity_name}: fallo el listado: {e}")
            raise PurgeFailedException(entity_name, 0, 0, str(e)) from e

        deleted = 0
        for record in existing:
            try:
                await self.store.delete(entity_name, record.id)
            except Exception as e:
                logger.error(f"Purga de {entity_name}: fallo el borrado de {record.id}: {e}")
                raise PurgeFailedException(entity_name, deleted, len(existing), str(e)) from e
            deleted += 1

        logger.info(f"Purga de {entity_name}: {deleted} registro(s) borrados")
        return deleted
