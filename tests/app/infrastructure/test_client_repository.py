import pytest
from sqlalchemy import Text
from sqlalchemy.exc import IntegrityError

from src.app.core.domain.models import Email, PersonalId
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.shared.exceptions import EntityNotFound

from tests.app.factories import make_client


async def _seed(unit_of_work, *clients):
    async with unit_of_work:
        for client in clients:
            unit_of_work.add(client)


@pytest.mark.asyncio
async def test_get_clients_filters_by_first_name_and_pages(client_repository, unit_of_work):
    """Test that only clients whose first name contains the filter are returned."""
    # Arrange
    await _seed(
        unit_of_work,
        make_client("John", "Doe"),
        make_client("Jane", "Smith"),
        make_client("John", "Smith"),
    )

    # Act
    result = await client_repository.get_clients("John", None, 1, 10)

    # Assert
    assert len(result) == 2
    assert all("John" in client.first_name for client in result)


@pytest.mark.asyncio
async def test_get_clients_matches_substring(client_repository, unit_of_work):
    """Test that filters use contains semantics rather than exact match."""
    # Arrange
    await _seed(
        unit_of_work,
        make_client("Johnathan", "Doe"),
        make_client("Jo", "Smith"),
        make_client("Mary", "Johnson"),
    )

    # Act
    result = await client_repository.get_clients("ohn", None, 1, 10)

    # Assert
    assert [client.first_name for client in result] == ["Johnathan"]


@pytest.mark.asyncio
async def test_get_clients_filters_by_last_name(client_repository, unit_of_work):
    """Test filtering on last name alone."""
    # Arrange
    await _seed(
        unit_of_work,
        make_client("John", "Doe"),
        make_client("Jane", "Smith"),
        make_client("John", "Smith"),
    )

    # Act
    result = await client_repository.get_clients(None, "Smith", 1, 10)

    # Assert
    assert {client.first_name for client in result} == {"Jane", "John"}
    assert all(client.last_name == "Smith" for client in result)


@pytest.mark.asyncio
async def test_get_clients_requires_both_filters_to_match(client_repository, unit_of_work):
    """Test that first and last name filters are combined."""
    # Arrange
    await _seed(
        unit_of_work,
        make_client("John", "Doe"),
        make_client("Jane", "Smith"),
        make_client("John", "Smith"),
    )

    # Act
    result = await client_repository.get_clients("John", "Smith", 1, 10)

    # Assert
    assert len(result) == 1
    assert result[0].first_name == "John"
    assert result[0].last_name == "Smith"


@pytest.mark.asyncio
async def test_get_clients_without_filters_returns_everyone(client_repository, unit_of_work):
    # Arrange
    await _seed(unit_of_work, make_client("John", "Doe"), make_client("Jane", "Smith"))

    # Act
    result = await client_repository.get_clients()

    # Assert
    assert len(result) == 2


@pytest.mark.asyncio
async def test_get_clients_treats_wildcards_literally(client_repository, unit_of_work):
    """Test that SQL wildcard characters in the filter are not expanded."""
    # Arrange
    await _seed(unit_of_work, make_client("John", "Doe"), make_client("50%", "Off"))

    # Act
    percent = await client_repository.get_clients("%", None, 1, 10)
    underscore = await client_repository.get_clients("_", None, 1, 10)

    # Assert
    assert [client.first_name for client in percent] == ["50%"]
    assert underscore == []


@pytest.mark.asyncio
async def test_get_clients_pages_in_id_order(client_repository, unit_of_work):
    """Test that pages are disjoint, ordered by ID and sized by page_size."""
    # Arrange
    clients = [make_client(f"Client{i}", "Doe") for i in range(5)]
    await _seed(unit_of_work, *clients)

    # Act
    first_page = await client_repository.get_clients(None, None, 1, 2)
    second_page = await client_repository.get_clients(None, None, 2, 2)
    third_page = await client_repository.get_clients(None, None, 3, 2)
    fourth_page = await client_repository.get_clients(None, None, 4, 2)

    # Assert
    assert [c.first_name for c in first_page] == ["Client0", "Client1"]
    assert [c.first_name for c in second_page] == ["Client2", "Client3"]
    assert [c.first_name for c in third_page] == ["Client4"]
    assert fourth_page == []

    ids = [c.id for c in first_page + second_page + third_page]
    assert ids == sorted(ids)


@pytest.mark.asyncio
async def test_get_clients_order_is_stable_across_calls(client_repository, unit_of_work):
    # Arrange
    await _seed(unit_of_work, *[make_client(f"Client{i}") for i in range(4)])

    # Act
    first = await client_repository.get_clients(None, None, 1, 10)
    second = await client_repository.get_clients(None, None, 1, 10)

    # Assert
    assert [c.id for c in first] == [c.id for c in second]


@pytest.mark.asyncio
@pytest.mark.parametrize("page_number, page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
async def test_get_clients_rejects_invalid_paging(client_repository, page_number, page_size):
    with pytest.raises(ValueError):
        await client_repository.get_clients(None, None, page_number, page_size)


@pytest.mark.asyncio
async def test_get_client_by_id(client_repository, unit_of_work):
    """Test retrieving a client by ID."""
    # Arrange
    client = make_client("John", "Doe")
    await _seed(unit_of_work, client)

    # Act
    result = await client_repository.get_client_by_id(client.id)

    # Assert
    assert result is not None
    assert result.first_name == client.first_name
    assert result.last_name == client.last_name


@pytest.mark.asyncio
async def test_get_client_by_id_not_found(client_repository):
    """Test retrieving a non-existent client by ID returns None."""
    # Act
    result = await client_repository.get_client_by_id(999)

    # Assert
    assert result is None


@pytest.mark.asyncio
async def test_add_client(client_repository):
    """Test that adding a client persists it and assigns an ID."""
    # Arrange
    client = make_client("John", "Doe")
    assert client.id is None

    # Act
    await client_repository.add_client(client)

    # Assert
    assert client.id is not None
    all_clients = await client_repository.get_clients()
    assert len(all_clients) == 1

    added_client = await client_repository.get_client_by_id(client.id)
    assert added_client.model_dump() == client.model_dump()
    assert added_client.email.value == "john.doe@example.com"
    assert added_client.personal_id.value == "12345678901"


@pytest.mark.asyncio
async def test_add_client_assigns_distinct_ids(client_repository):
    # Arrange
    first = make_client("John", "Doe")
    second = make_client("Jane", "Smith")

    # Act
    await client_repository.add_client(first)
    await client_repository.add_client(second)

    # Assert
    assert first.id != second.id


@pytest.mark.asyncio
async def test_add_client_keeps_long_free_text(client_repository):
    """Test that names and mobile numbers are stored without truncation."""
    # Arrange
    client = make_client("A" * 300, "B" * 300)
    client.mobile_number = "1" * 64

    # Act
    await client_repository.add_client(client)

    # Assert
    stored = await client_repository.get_client_by_id(client.id)
    assert stored.first_name == "A" * 300
    assert stored.last_name == "B" * 300
    assert stored.mobile_number == "1" * 64


@pytest.mark.parametrize("column", ["first_name", "last_name", "mobile_number", "profile_photo"])
def test_free_text_columns_have_no_length_limit(column):
    column_type = ClientEntity.__table__.c[column].type
    assert isinstance(column_type, Text)
    assert column_type.length is None


@pytest.mark.asyncio
async def test_add_client_with_preset_id_uses_it(client_repository):
    # Arrange
    client = make_client("John", "Doe")
    client.id = 777

    # Act
    await client_repository.add_client(client)

    # Assert
    assert client.id == 777
    stored = await client_repository.get_client_by_id(777)
    assert stored is not None
    assert stored.first_name == "John"


@pytest.mark.asyncio
async def test_add_client_storage_fault_propagates_after_rollback(client_repository, unit_of_work):
    """Test that a failed commit raises the storage error and leaves the table unchanged."""
    # Arrange
    existing = make_client("John", "Doe")
    await _seed(unit_of_work, existing)
    duplicate = make_client("Jane", "Smith")
    duplicate.id = existing.id

    # Act & Assert
    with pytest.raises(IntegrityError):
        await client_repository.add_client(duplicate)

    all_clients = await client_repository.get_clients()
    assert len(all_clients) == 1
    assert all_clients[0].first_name == "John"

    # The repository is still usable after the failed commit
    await client_repository.add_client(make_client("Jane", "Smith"))
    assert len(await client_repository.get_clients()) == 2


@pytest.mark.asyncio
async def test_update_client(client_repository, unit_of_work):
    """Test that updating a client changes the stored row without duplicating it."""
    # Arrange
    client = make_client("John", "Doe")
    await _seed(unit_of_work, client)
    client.first_name = "Johnny"
    client.last_name = "Smith"
    client.email = Email("john.smith@example.com")
    client.personal_id = PersonalId("10987654321")
    client.mobile_number = "+41 79 555 00 00"
    client.profile_photo = "photos/johnny.png"

    # Act
    await client_repository.update_client(client)

    # Assert
    all_clients = await client_repository.get_clients()
    assert len(all_clients) == 1
    stored = all_clients[0]
    assert stored.id == client.id
    assert stored.first_name == "Johnny"
    assert stored.last_name == "Smith"
    assert stored.email == Email("john.smith@example.com")
    assert stored.personal_id == PersonalId("10987654321")
    assert stored.mobile_number == "+41 79 555 00 00"
    assert stored.profile_photo == "photos/johnny.png"


@pytest.mark.asyncio
async def test_update_client_not_found(client_repository):
    """Test that updating a client that was never stored raises and inserts nothing."""
    # Arrange
    client = make_client("John", "Doe")
    client.id = 42

    # Act & Assert
    with pytest.raises(EntityNotFound):
        await client_repository.update_client(client)

    assert await client_repository.get_clients() == []


@pytest.mark.asyncio
async def test_update_client_without_id(client_repository):
    with pytest.raises(EntityNotFound):
        await client_repository.update_client(make_client())


@pytest.mark.asyncio
async def test_delete_client(client_repository, unit_of_work):
    """Test that deleting a client removes it from the database."""
    # Arrange
    client = make_client("John", "Doe")
    await _seed(unit_of_work, client)

    # Act
    await client_repository.delete_client(client.id)

    # Assert
    assert await client_repository.get_clients() == []
    assert await client_repository.get_client_by_id(client.id) is None


@pytest.mark.asyncio
async def test_delete_client_not_found_is_noop(client_repository, unit_of_work):
    # Arrange
    client = make_client("John", "Doe")
    await _seed(unit_of_work, client)

    # Act
    await client_repository.delete_client(client.id + 1)

    # Assert
    assert len(await client_repository.get_clients()) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 1, 3, 100])
async def test_get_last_search_parameters_is_empty(client_repository, unit_of_work, limit):
    """Search history is not recorded, so nothing is ever returned."""
    # Arrange
    await _seed(unit_of_work, make_client())
    await client_repository.get_clients("John", None, 1, 10)

    # Act
    result = await client_repository.get_last_search_parameters(limit)

    # Assert
    assert result == []
