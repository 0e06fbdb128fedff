from fastapi import APIRouter, Query, status

from src.api.core.dependencies import VesselDirectoryDep
from src.api.core.exceptions.base import BoatIdentifierException
from src.api.core.messages import MessageCode, SuccessResponse
from src.modules.vessels.models import VesselRecord, VesselSearchHints
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


class VesselSearchResponse(SuccessResponse):
    results: list[VesselRecord]


class VesselResponse(SuccessResponse):
    vessel: VesselRecord


@router.get("", response_model=VesselSearchResponse)
async def search_vessels(
    directory: VesselDirectoryDep,
    q: str | None = Query(default=None),
    type: str | None = Query(default=None),
    mmsi: str | None = Query(default=None),
    imo: str | None = Query(default=None),
) -> VesselSearchResponse:
    """Search by free text, type or identifier. Identifiers take precedence."""
    try:
        vessel = await directory.lookup(
            VesselSearchHints(query=q, type=type, mmsi=mmsi, imo=imo)
        )
    except Exception as e:
        logger.error(f"Search error: {e}")
        raise BoatIdentifierException(
            MessageCode.SEARCH_FAILED,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            description=str(e),
        )

    return VesselSearchResponse(results=[vessel] if vessel else [])


@router.get("/vessel/{mmsi}", response_model=VesselResponse)
async def get_vessel(mmsi: str, directory: VesselDirectoryDep) -> VesselResponse:
    try:
        vessel = await directory.lookup_by_mmsi(mmsi)
    except Exception as e:
        logger.error(f"Vessel lookup error: {e}")
        raise BoatIdentifierException(
            MessageCode.VESSEL_LOOKUP_FAILED,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            description=str(e),
        )

    if vessel is None:
        raise BoatIdentifierException(
            MessageCode.VESSEL_NOT_FOUND, status.HTTP_404_NOT_FOUND
        )

    return VesselResponse(vessel=vessel)
