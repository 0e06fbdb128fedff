"""Feedback endpoints tests."""

import pytest
from fastapi import status
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_submit_feedback(public_client: AsyncClient):
    response = await public_client.post(
        "/feedback",
        json={"identification_id": 1, "is_correct": True, "feedback_text": "Spot on"},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["success"] is True
    assert isinstance(data["id"], int)
    assert data["message"] == "Thank you for your feedback!"


@pytest.mark.asyncio
async def test_feedback_requires_identification_id(public_client: AsyncClient):
    response = await public_client.post("/feedback", json={"is_correct": True})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "identification_id is required"}


@pytest.mark.asyncio
async def test_feedback_without_body(public_client: AsyncClient):
    response = await public_client.post("/feedback")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "identification_id is required"}


@pytest.mark.asyncio
async def test_feedback_stats(public_client: AsyncClient):
    for is_correct in (True, True, False):
        await public_client.post(
            "/feedback", json={"identification_id": 7, "is_correct": is_correct}
        )
    # is_correct defaults to false
    await public_client.post("/feedback", json={"identification_id": 7})

    response = await public_client.get("/feedback/stats")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "success": True,
        "stats": {"total": 4, "correct_count": 2, "incorrect_count": 2},
    }
