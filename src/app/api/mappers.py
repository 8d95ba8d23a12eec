"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Client, SearchParameters
from src.client.schemas import ClientResponse, SearchParametersResponse


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model, already persisted

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        first_name=client.first_name,
        last_name=client.last_name,
        email=client.email.value,
        personal_id=client.personal_id.value,
        mobile_number=client.mobile_number,
        profile_photo=client.profile_photo,
    )


def to_search_parameters_response(parameters: SearchParameters) -> SearchParametersResponse:
    return SearchParametersResponse.model_validate(parameters)
