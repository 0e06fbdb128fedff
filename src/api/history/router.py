from fastapi import APIRouter, Query, status

from src.api.core.dependencies import IdentificationStoreDep
from src.api.core.exceptions.base import BoatIdentifierException
from src.api.core.messages import MessageCode, MessageResponse, get_default_message
from src.api.history.schemas import (
    HistoryResponse,
    IdentificationRecord,
    IdentificationResponse,
)
from src.modules.identification.store import DEFAULT_LIMIT

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=HistoryResponse)
async def list_history(
    store: IdentificationStoreDep,
    limit: int = Query(default=DEFAULT_LIMIT),
    offset: int = Query(default=0),
) -> HistoryResponse:
    """Newest identifications first. Out-of-range paging values are clamped."""
    rows = await store.list_identifications(limit=limit, offset=offset)
    identifications = [IdentificationRecord.model_validate(row) for row in rows]
    return HistoryResponse(count=len(identifications), identifications=identifications)


@router.get("/{identification_id}", response_model=IdentificationResponse)
async def get_identification(
    identification_id: int, store: IdentificationStoreDep
) -> IdentificationResponse:
    row = await store.get(identification_id)
    if row is None:
        raise BoatIdentifierException(
            MessageCode.IDENTIFICATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
        )
    return IdentificationResponse(
        identification=IdentificationRecord.model_validate(row)
    )


@router.delete("/{identification_id}", response_model=MessageResponse)
async def delete_identification(
    identification_id: int, store: IdentificationStoreDep
) -> MessageResponse:
    if not await store.delete(identification_id):
        raise BoatIdentifierException(
            MessageCode.IDENTIFICATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
        )
    return MessageResponse(
        message=get_default_message(MessageCode.IDENTIFICATION_DELETED)
    )
