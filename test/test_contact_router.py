"""
API integration tests for contact router.
"""

import pytest
from fastapi import status
from httpx import AsyncClient

from contacts_api.shared.middleware import CORRELATION_ID_HEADER


async def _create(client: AsyncClient, name: str, email: str) -> dict:
    response = await client.post("/api/contact", json={"name": name, "email": email})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestListContacts:
    """Tests for GET /api/contacts."""

    @pytest.mark.asyncio
    async def test_second_page_of_twelve(
        self,
        async_client: AsyncClient,
        seed_contacts,
    ) -> None:
        seeded = await seed_contacts(12)

        response = await async_client.get("/api/contacts", params={"page": 2, "pageSize": 5})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["currentPage"] == 2
        assert data["totalItems"] == 12
        assert data["pageSize"] == 5
        assert data["totalPages"] == 3
        assert [c["id"] for c in data["contacts"]] == [c.id for c in seeded[5:10]]

    @pytest.mark.asyncio
    async def test_defaults(self, async_client: AsyncClient, seed_contacts) -> None:
        await seed_contacts(3)

        response = await async_client.get("/api/contacts")

        data = response.json()
        assert data["currentPage"] == 1
        assert data["pageSize"] == 10
        assert data["totalPages"] == 1
        assert len(data["contacts"]) == 3
        assert set(data["contacts"][0]) == {"id", "name", "email"}

    @pytest.mark.asyncio
    async def test_empty_store(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/contacts")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "currentPage": 1,
            "totalItems": 0,
            "pageSize": 10,
            "totalPages": 0,
            "contacts": [],
        }

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(
        self,
        async_client: AsyncClient,
        seed_contacts,
    ) -> None:
        await seed_contacts(4)

        response = await async_client.get("/api/contacts", params={"page": 9, "pageSize": 2})

        data = response.json()
        assert data["totalItems"] == 4
        assert data["totalPages"] == 2
        assert data["contacts"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [
            {"page": 0},
            {"page": -1},
            {"page": "abc"},
            {"pageSize": 0},
            {"pageSize": "ten"},
            {"pageSize": 2**63},
            {"page": 10**19},
        ],
    )
    async def test_invalid_pagination_rejected(
        self,
        async_client: AsyncClient,
        params: dict,
    ) -> None:
        response = await async_client.get("/api/contacts", params=params)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["errors"][0]["field"].startswith("query.")

    @pytest.mark.asyncio
    async def test_page_size_above_one_hundred(
        self,
        async_client: AsyncClient,
        seed_contacts,
    ) -> None:
        await seed_contacts(150)

        response = await async_client.get("/api/contacts", params={"page": 1, "pageSize": 150})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["pageSize"] == 150
        assert data["totalPages"] == 1
        assert len(data["contacts"]) == 150

    @pytest.mark.asyncio
    async def test_largest_page_size_is_accepted(self, async_client: AsyncClient, seed_contacts) -> None:
        await seed_contacts(2)

        response = await async_client.get("/api/contacts", params={"pageSize": 2**63 - 1})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["contacts"]) == 2

    @pytest.mark.asyncio
    async def test_offset_beyond_integer_range_rejected(self, async_client: AsyncClient) -> None:
        response = await async_client.get(
            "/api/contacts",
            params={"page": 2**62, "pageSize": 4},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"


class TestContactLifecycle:
    """Create, read, update and delete through the HTTP surface."""

    @pytest.mark.asyncio
    async def test_create_contact(self, async_client: AsyncClient) -> None:
        data = await _create(async_client, "John Doe", "john@example.com")

        assert isinstance(data["id"], int)
        assert data["name"] == "John Doe"
        assert data["email"] == "john@example.com"

    @pytest.mark.asyncio
    async def test_get_created_contact(self, async_client: AsyncClient) -> None:
        created = await _create(async_client, "John Doe", "john@example.com")

        response = await async_client.get(f"/api/contact/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_update_then_get_reflects_new_values(self, async_client: AsyncClient) -> None:
        created = await _create(async_client, "Old Name", "old@example.com")

        response = await async_client.put(
            f"/api/contact/{created['id']}",
            json={"name": "New Name", "email": "new@example.com"},
        )
        assert response.status_code == status.HTTP_200_OK

        fetched = (await async_client.get(f"/api/contact/{created['id']}")).json()
        assert fetched == {"id": created["id"], "name": "New Name", "email": "new@example.com"}

    @pytest.mark.asyncio
    async def test_update_ignores_id_in_body(self, async_client: AsyncClient) -> None:
        created = await _create(async_client, "Jane", "jane@example.com")

        response = await async_client.put(
            f"/api/contact/{created['id']}",
            json={"id": 999, "name": "Jane", "email": "jane@example.com"},
        )

        assert response.json()["id"] == created["id"]

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, async_client: AsyncClient) -> None:
        created = await _create(async_client, "Temp", "temp@example.com")

        response = await async_client.delete(f"/api/contact/{created['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

        response = await async_client.get(f"/api/contact/{created['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, async_client: AsyncClient) -> None:
        first = await _create(async_client, "First", "first@example.com")
        await async_client.delete(f"/api/contact/{first['id']}")

        second = await _create(async_client, "Second", "second@example.com")

        assert second["id"] > first["id"]


class TestContactErrors:
    """Error taxonomy at the HTTP boundary."""

    @pytest.mark.asyncio
    async def test_get_missing_contact(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/contact/9999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "detail": {"code": "NOT_FOUND", "message": "Contact 9999 not found"}
        }

    @pytest.mark.asyncio
    async def test_non_integer_id(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/contact/abc")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"name": "No Email"},
            {"email": "noname@example.com"},
            {},
        ],
    )
    async def test_create_requires_name_and_email(
        self,
        async_client: AsyncClient,
        body: dict,
    ) -> None:
        response = await async_client.post("/api/contact", json=body)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_create_with_shared_email(self, async_client: AsyncClient) -> None:
        first = await _create(async_client, "One", "same@example.com")

        second = await _create(async_client, "Two", "same@example.com")

        assert second["id"] != first["id"]
        assert second["email"] == first["email"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("contact_id", [2**63, 10**20, -(2**63) - 1])
    async def test_id_outside_integer_range_rejected(
        self,
        async_client: AsyncClient,
        contact_id: int,
    ) -> None:
        response = await async_client.get(f"/api/contact/{contact_id}")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"
        assert CORRELATION_ID_HEADER in response.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize("contact_id", [0, -1, 2**63 - 1])
    async def test_id_at_integer_edges_is_not_found(
        self,
        async_client: AsyncClient,
        contact_id: int,
    ) -> None:
        response = await async_client.get(f"/api/contact/{contact_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_missing_contact(self, async_client: AsyncClient) -> None:
        response = await async_client.put(
            "/api/contact/777",
            json={"name": "Ghost", "email": "ghost@example.com"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_missing_contact(self, async_client: AsyncClient) -> None:
        response = await async_client.delete("/api/contact/777")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_duplicated_prefix_route_is_not_registered(
        self,
        async_client: AsyncClient,
    ) -> None:
        response = await async_client.post(
            "/api/api/contact",
            json={"name": "X", "email": "x@example.com"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
