from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client, Email, PersonalId
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    entity_type = ClientEntity

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (database entity)."""
        return ClientEntity(
            id=model_instance.id,
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            email=model_instance.email.value,
            personal_id=model_instance.personal_id.value,
            mobile_number=model_instance.mobile_number,
            profile_photo=model_instance.profile_photo,
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        return Client(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=Email(entity.email),
            personal_id=PersonalId(entity.personal_id),
            mobile_number=entity.mobile_number,
            profile_photo=entity.profile_photo,
        )

    @staticmethod
    def sync_identity(model_instance: Client, entity: ClientEntity) -> None:
        model_instance.id = entity.id
