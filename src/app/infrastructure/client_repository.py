import logging
from typing import Optional

from sqlalchemy import select

from src.app.core.domain.models import Client, SearchParameters
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper

logger = logging.getLogger(__name__)


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """
    Repository for Client operations.

    Reads open a short-lived session each. Writes go through the unit of
    work and are committed before the call returns.
    """

    def __init__(self, db: Database, mapper: ClientMapper, unit_of_work: UnitOfWork):
        super().__init__(db, mapper)
        self.unit_of_work = unit_of_work

    async def get_clients(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        page_number: int = 1,
        page_size: int = 10,
    ) -> list[Client]:
        """
        Get a page of clients filtered by name.

        Args:
            first_name: Substring the first name must contain. None disables the filter.
            last_name: Substring the last name must contain. None disables the filter.
            page_number: 1-based page index
            page_size: Maximum number of clients per page

        Returns:
            Matching clients ordered by ID

        Raises:
            ValueError: If page_number or page_size is below 1
        """
        if page_number < 1:
            raise ValueError("Page number must be at least 1")
        if page_size < 1:
            raise ValueError("Page size must be at least 1")

        stmt = select(ClientEntity)
        if first_name is not None:
            stmt = stmt.where(ClientEntity.first_name.contains(first_name, autoescape=True))
        if last_name is not None:
            stmt = stmt.where(ClientEntity.last_name.contains(last_name, autoescape=True))

        stmt = (
            stmt.order_by(ClientEntity.id)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        return await self.find_all(stmt)

    async def get_client_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID, or None if it does not exist."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def add_client(self, client: Client) -> None:
        """
        Insert a client. The storage-assigned ID is set on ``client``.

        A client that already carries an ID is inserted under that ID. If the
        ID is taken, the storage error propagates and nothing is written.
        """
        async with self.unit_of_work:
            self.unit_of_work.add(client)
        logger.info("Added client %s", client.id)

    async def update_client(self, client: Client) -> None:
        """
        Persist every field of an existing client.

        Raises:
            EntityNotFound: If the client has no ID or no row with its ID exists
        """
        async with self.unit_of_work:
            if client.id is None or not await self.unit_of_work.contains(Client, client.id):
                raise EntityNotFound("Client", client.id)
            await self.unit_of_work.update(client)
        logger.info("Updated client %s", client.id)

    async def delete_client(self, client_id: int) -> None:
        """Delete a client by ID. Deleting a missing client does nothing."""
        async with self.unit_of_work:
            removed = await self.unit_of_work.delete(Client, client_id)
        if removed:
            logger.info("Deleted client %s", client_id)
        else:
            logger.warning("Client %s not found, nothing to delete", client_id)

    async def get_last_search_parameters(self, limit: int) -> list[SearchParameters]:
        # Search history is not recorded, so there is never anything to return.
        return []
