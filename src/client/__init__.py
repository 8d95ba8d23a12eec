"""HTTP client SDK for the Banking Control Panel API."""
from src.client.banking_client import BankingClient
from src.client.schemas import (
    ClientResponse,
    CreateClientRequest,
    SearchParametersResponse,
    UpdateClientRequest,
)

__all__ = [
    "BankingClient",
    "ClientResponse",
    "CreateClientRequest",
    "SearchParametersResponse",
    "UpdateClientRequest",
]
