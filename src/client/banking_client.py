"""HTTP client for consuming the Banking Control Panel API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateClientRequest,
    UpdateClientRequest,
    ClientResponse,
    SearchParametersResponse,
)

CLIENTS_PATH = "/api/v1/clients"


class BankingClient:
    """HTTP client for interacting with the Banking Control Panel API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response, including the assigned ID

        Raises:
            httpx.HTTPStatusError: If the request fails (400 on invalid email or personal ID)
        """
        response: Response = await self.client.post(
            f"{CLIENTS_PATH}/",
            json=request.model_dump(mode="json")
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def get_client(self, client_id: int) -> ClientResponse:
        """
        Get a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"{CLIENTS_PATH}/{client_id}")
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def list_clients(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> list[ClientResponse]:
        """
        List clients whose names contain the given filters, one page at a time.

        Args:
            first_name: Substring the first name must contain
            last_name: Substring the last name must contain
            page: 1-based page number
            page_size: Clients per page (server default when omitted)

        Returns:
            Matching clients ordered by ID
        """
        params: dict[str, str | int] = {"page": page}
        if first_name is not None:
            params["first_name"] = first_name
        if last_name is not None:
            params["last_name"] = last_name
        if page_size is not None:
            params["page_size"] = page_size

        response: Response = await self.client.get(f"{CLIENTS_PATH}/", params=params)
        response.raise_for_status()
        return [ClientResponse(**client) for client in response.json()]

    async def update_client(self, client_id: int, request: UpdateClientRequest) -> ClientResponse:
        """
        Replace every field of an existing client.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if not found, 400 on invalid values)
        """
        response: Response = await self.client.put(
            f"{CLIENTS_PATH}/{client_id}",
            json=request.model_dump(mode="json"),
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def delete_client(self, client_id: int) -> None:
        """
        Delete a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"{CLIENTS_PATH}/{client_id}")
        response.raise_for_status()

    async def get_last_search_parameters(self, limit: int = 10) -> list[SearchParametersResponse]:
        """Fetch past client searches. None are recorded, so the list is always empty."""
        response: Response = await self.client.get(
            f"{CLIENTS_PATH}/search-parameters",
            params={"limit": limit},
        )
        response.raise_for_status()
        return [SearchParametersResponse(**params) for params in response.json()]
