from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from dependency_injector.wiring import Provide, inject

from src.app.config import Settings
from src.app.containers import Container
from src.app.core.domain.models import SearchParameters
from src.app.core.services.client_service import ClientService
from src.client.schemas import (
    CreateClientRequest,
    UpdateClientRequest,
    ClientResponse,
    SearchParametersResponse,
)
from src.app.api.mappers import to_client_response, to_search_parameters_response
from src.shared.exceptions import EntityNotFound
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_client(
    request: CreateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Create a new client."""
    try:
        client = await service.create_client(request)
        return to_client_response(client)
    except ValueError as e:
        logger.error(f"Failed to create client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/", response_model=list[ClientResponse])
@inject
async def list_clients(
    first_name: Annotated[str | None, Query(description="Substring the first name must contain")] = None,
    last_name: Annotated[str | None, Query(description="Substring the last name must contain")] = None,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    page_size: Annotated[int | None, Query(ge=1, description="Clients per page")] = None,
    service: ClientService = Depends(Provide[Container.client_service]),
    config: Settings = Depends(Provide[Container.config]),
) -> list[ClientResponse]:
    """
    List clients filtered by first and/or last name, one page at a time.

    Args:
        first_name: Optional first name filter (contains match)
        last_name: Optional last name filter (contains match)
        page: Page number, starting at 1
        page_size: Clients per page (default and maximum from config)

    Returns:
        Matching clients ordered by ID
    """
    effective_page_size = page_size if page_size is not None else config.paging.default_page_size
    if effective_page_size > config.paging.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Page size cannot exceed {config.paging.max_page_size}",
        )

    parameters = SearchParameters(
        first_name=first_name,
        last_name=last_name,
        page_number=page,
        page_size=effective_page_size,
    )
    clients = await service.list_clients(parameters)
    return [to_client_response(client) for client in clients]


@router.get("/search-parameters", response_model=list[SearchParametersResponse])
@inject
async def get_last_search_parameters(
    limit: Annotated[int, Query(ge=1, le=100, description="Maximum number of searches")] = 10,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[SearchParametersResponse]:
    """Get the most recent client searches."""
    parameters = await service.get_last_search_parameters(limit)
    return [to_search_parameters_response(p) for p in parameters]


@router.get("/{client_id}", response_model=ClientResponse)
@inject
async def get_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Get a client by ID."""
    try:
        client = await service.get_client(client_id)
        return to_client_response(client)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{client_id}", response_model=ClientResponse)
@inject
async def update_client(
    client_id: int,
    request: UpdateClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Replace every field of an existing client."""
    try:
        client = await service.update_client(client_id, request)
        return to_client_response(client)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        logger.error(f"Failed to update client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> None:
    """Delete a client by ID."""
    try:
        await service.delete_client(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
