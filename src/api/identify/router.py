from pathlib import Path

from fastapi import APIRouter, File, UploadFile, status

from src.api.core.dependencies import (
    IdentificationReconcilerDep,
    IdentificationStoreDep,
    UploadDirDep,
)
from src.api.core.exceptions.base import BoatIdentifierException
from src.api.core.messages import MessageCode
from src.api.identify.schemas import (
    Base64ImageRequest,
    IdentificationSummary,
    IdentifyResponse,
)
from src.api.identify.validators import (
    decode_base64_image,
    save_image,
    validate_image_upload,
)
from src.modules.identification.reconciler import (
    IdentificationReconciler,
    build_draft,
)
from src.modules.identification.store import IdentificationStore
from src.utils.logger import get_logger
from src.utils.settings.app import AppSettings
from src.utils.settings.storage import StorageSettings

logger = get_logger(__name__)

router = APIRouter(prefix="/identify", tags=["identify"])


async def run_identification(
    data: bytes,
    extension: str,
    upload_dir: Path,
    reconciler: IdentificationReconciler,
    store: IdentificationStore,
) -> IdentifyResponse:
    """Save the image, identify it, persist the merged record."""
    try:
        image_path = await save_image(upload_dir, data, extension)
        image_url = f"{StorageSettings().UPLOAD_URL_PREFIX}/{image_path.name}"

        logger.info("Analyzing boat image", image_url=image_url)
        outcome = await reconciler.identify(image_path)
    except Exception as e:
        logger.error(f"Identification error: {e}")
        raise BoatIdentifierException(
            MessageCode.IDENTIFICATION_FAILED,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            description=str(e),
        )

    identification_id = await store.create(build_draft(image_url, outcome))

    classification = outcome.classification
    return IdentifyResponse(
        id=identification_id,
        image_url=image_url,
        identification=IdentificationSummary(
            boat_type=classification.boat_type,
            brand=classification.brand,
            model=classification.model,
            confidence=classification.confidence,
            labels=classification.labels,
            colors=classification.colors,
            description=classification.description,
            attributes=classification.attributes,
        ),
        vessel_data=outcome.vessel,
        similar_boats=classification.similar_entities,
    )


@router.post("", response_model=IdentifyResponse)
async def identify_upload(
    reconciler: IdentificationReconcilerDep,
    store: IdentificationStoreDep,
    upload_dir: UploadDirDep,
    image: UploadFile | None = File(None),
) -> IdentifyResponse:
    """Identify a boat from a multipart upload in the ``image`` field."""
    if image is None or not image.filename:
        raise BoatIdentifierException(
            MessageCode.NO_IMAGE_PROVIDED, status.HTTP_400_BAD_REQUEST
        )

    content = await validate_image_upload(image, AppSettings().MAX_UPLOAD_SIZE)
    extension = Path(image.filename).suffix.lower()

    return await run_identification(content, extension, upload_dir, reconciler, store)


@router.post("/base64", response_model=IdentifyResponse)
async def identify_base64(
    reconciler: IdentificationReconcilerDep,
    store: IdentificationStoreDep,
    upload_dir: UploadDirDep,
    body: Base64ImageRequest | None = None,
) -> IdentifyResponse:
    """Identify a boat from a data URL or raw base64 string."""
    if body is None or not body.image:
        raise BoatIdentifierException(
            MessageCode.NO_IMAGE_DATA_PROVIDED, status.HTTP_400_BAD_REQUEST
        )

    data, extension = decode_base64_image(body.image)

    return await run_identification(data, extension, upload_dir, reconciler, store)
