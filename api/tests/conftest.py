"""
Configuración de fixtures para pytest.
"""
import os

# La app crea su engine al importar: forzar SQLite antes de cualquier import de app.*
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from app.domain.entities.entity_mapping import EntityMappingRegistry
from app.domain.entities.sync import UpstreamCredentials
from app.infrastructure.database.session import Base
from app.infrastructure.external.sap_odata.entity_mappings import build_default_registry


# URL de base de datos de prueba
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Fixture que proporciona una sesión de base de datos para tests.
    Crea una base de datos en memoria para cada test.
    """
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def registry() -> EntityMappingRegistry:
    return build_default_registry()


@pytest.fixture
def credentials() -> UpstreamCredentials:
    return UpstreamCredentials(username="sap_user", password="s3cret")
