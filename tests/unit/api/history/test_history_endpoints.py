"""History endpoints tests."""

import pytest
from fastapi import status
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_history_pages_newest_first(
    public_client: AsyncClient, db_session, identification_factory
):
    created = await identification_factory.create_batch_async(db_session, 3)

    first_page = await public_client.get("/history", params={"limit": 1, "offset": 0})
    second_page = await public_client.get("/history", params={"limit": 1, "offset": 1})

    assert first_page.status_code == status.HTTP_200_OK
    first = first_page.json()
    assert first["success"] is True
    assert first["count"] == 1
    assert first["identifications"][0]["id"] == created[2].id
    assert second_page.json()["identifications"][0]["id"] == created[1].id


@pytest.mark.asyncio
async def test_history_defaults(
    public_client: AsyncClient, db_session, identification_factory
):
    await identification_factory.create_batch_async(db_session, 2)

    response = await public_client.get("/history")

    data = response.json()
    assert data["count"] == 2
    assert [r["id"] for r in data["identifications"]] == sorted(
        (r["id"] for r in data["identifications"]), reverse=True
    )


@pytest.mark.asyncio
async def test_history_zero_limit_returns_default_page(
    public_client: AsyncClient, db_session, identification_factory
):
    await identification_factory.create_batch_async(db_session, 3)

    response = await public_client.get("/history", params={"limit": 0})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["count"] == 3


@pytest.mark.asyncio
async def test_history_empty(public_client: AsyncClient):
    response = await public_client.get("/history")

    assert response.json() == {"success": True, "count": 0, "identifications": []}


@pytest.mark.asyncio
async def test_get_identification(
    public_client: AsyncClient, db_session, identification_factory
):
    record = await identification_factory.create_async(
        db_session, boat_type="Tugboat", vessel_name="Harbor Hand"
    )

    response = await public_client.get(f"/history/{record.id}")

    assert response.status_code == status.HTTP_200_OK
    identification = response.json()["identification"]
    assert identification["id"] == record.id
    assert identification["boat_type"] == "Tugboat"
    assert identification["vessel_name"] == "Harbor Hand"
    assert identification["identified_at"]


@pytest.mark.asyncio
async def test_get_identification_not_found(public_client: AsyncClient):
    response = await public_client.get("/history/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Identification not found"}


@pytest.mark.asyncio
async def test_delete_identification(
    public_client: AsyncClient, db_session, identification_factory
):
    record = await identification_factory.create_async(db_session)

    response = await public_client.delete(f"/history/{record.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Identification deleted"}

    after = await public_client.get(f"/history/{record.id}")
    assert after.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_identification_not_found(public_client: AsyncClient):
    response = await public_client.delete("/history/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Identification not found"}


@pytest.mark.asyncio
async def test_non_numeric_id_is_rejected(public_client: AsyncClient):
    response = await public_client.get("/history/abc")

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["error"] == "Invalid input provided"
