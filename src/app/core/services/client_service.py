from src.app.core.domain.models import Client, Email, PersonalId, SearchParameters
from src.app.infrastructure.client_repository import ClientRepository
from src.app.logging import get_logger
from src.client.schemas import CreateClientRequest, UpdateClientRequest
from src.shared.exceptions import EntityNotFound

logger = get_logger(__name__)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(self, repository: ClientRepository):
        self.repository = repository

    async def create_client(self, request: CreateClientRequest) -> Client:
        """
        Create a new client.

        Raises:
            ValueError: If the email or personal ID fails validation
        """
        client = Client(
            first_name=request.first_name,
            last_name=request.last_name,
            email=Email(request.email),
            personal_id=PersonalId(request.personal_id),
            mobile_number=request.mobile_number,
            profile_photo=request.profile_photo,
        )
        await self.repository.add_client(client)
        logger.info(f"Created client {client.id}")
        return client

    async def get_client(self, client_id: int) -> Client:
        """Get a client by ID."""
        client = await self.repository.get_client_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def update_client(self, client_id: int, request: UpdateClientRequest) -> Client:
        """Replace every mutable field of an existing client."""
        client = await self.get_client(client_id)

        # Validate before mutating the loaded client
        email = Email(request.email)
        personal_id = PersonalId(request.personal_id)

        client.first_name = request.first_name
        client.last_name = request.last_name
        client.email = email
        client.personal_id = personal_id
        client.mobile_number = request.mobile_number
        client.profile_photo = request.profile_photo

        await self.repository.update_client(client)
        logger.info(f"Updated client {client_id}")
        return client

    async def delete_client(self, client_id: int) -> None:
        """Delete an existing client."""
        await self.get_client(client_id)
        await self.repository.delete_client(client_id)
        logger.info(f"Deleted client {client_id}")

    async def list_clients(self, parameters: SearchParameters) -> list[Client]:
        """Get one page of clients matching the name filters."""
        return await self.repository.get_clients(
            first_name=parameters.first_name,
            last_name=parameters.last_name,
            page_number=parameters.page_number,
            page_size=parameters.page_size,
        )

    async def get_last_search_parameters(self, limit: int) -> list[SearchParameters]:
        return await self.repository.get_last_search_parameters(limit)
