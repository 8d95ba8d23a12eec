import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Scoped persistence context over a single session.

    Entering opens a fresh session. Leaving commits when the block finished
    cleanly and rolls back otherwise; the session is closed either way.
    Models passed to ``add`` receive their storage-assigned identity once
    the commit succeeds.
    """

    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper
        self._added: list[tuple[Any, Any]] = []

    async def __aenter__(self):
        self.session = self.db.session_maker()
        self._added = []
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)
        self._added.append((model_instance, entity))

    async def update(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        await self.session.merge(entity)

    async def contains(self, model_type: type, entity_id: Any) -> bool:
        entity_type = self.entity_mapper.entity_type_for(model_type)
        return await self.session.get(entity_type, entity_id) is not None

    async def delete(self, model_type: type, entity_id: Any) -> bool:
        """Remove the row with the given key. Returns False when no row matched."""
        entity_type = self.entity_mapper.entity_type_for(model_type)
        entity = await self.session.get(entity_type, entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        return True

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            logger.exception("Commit failed, rolling back")
            await self.rollback()
            raise
        for model_instance, entity in self._added:
            self.entity_mapper.sync_identity(model_instance, entity)
        self._added = []

    async def rollback(self):
        await self.session.rollback()
        self._added = []
