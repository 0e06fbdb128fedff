"""Image classifier adapter: live Vision analysis with deterministic fallbacks."""

import asyncio
from pathlib import Path

from src.modules.classification.analysis import (
    build_live_classification,
    failed_classification,
)
from src.modules.classification.models import ClassificationResult
from src.modules.classification.synthetic import generate_synthetic_classification
from src.modules.classification.vision_client import (
    GoogleVisionClient,
    VisionServiceUnavailable,
)
from src.utils.logger import get_logger
from src.utils.settings.vision import VisionSettings

logger = get_logger(__name__)


class ImageClassifier:
    """Classifies boat images. ``classify`` never raises.

    With a Vision client the four annotation queries run concurrently; if the
    service cannot be reached the synthetic classifier answers instead, and
    any other failure degrades to a minimal "analysis failed" result.
    """

    def __init__(self, vision_client: GoogleVisionClient | None = None):
        self.vision_client = vision_client

    @property
    def is_live(self) -> bool:
        return self.vision_client is not None

    async def classify(self, image_path: str | Path) -> ClassificationResult:
        if self.vision_client is None:
            logger.info("Using synthetic classification", image_path=str(image_path))
            return await self._classify_synthetic(image_path)

        try:
            return await self._classify_live(self.vision_client, image_path)
        except VisionServiceUnavailable as e:
            logger.warning(f"Vision service unreachable, using synthetic result: {e}")
            return await self._classify_synthetic(image_path)
        except Exception as e:
            logger.error(f"Vision analysis failed: {e}", image_path=str(image_path))
            return failed_classification(str(e))

    async def _classify_live(
        self, client: GoogleVisionClient, image_path: str | Path
    ) -> ClassificationResult:
        image_data = await asyncio.to_thread(Path(image_path).read_bytes)

        # The first failing query cancels the rest
        try:
            async with asyncio.TaskGroup() as tg:
                labels = tg.create_task(client.detect_labels(image_data))
                objects = tg.create_task(client.localize_objects(image_data))
                properties = tg.create_task(client.image_properties(image_data))
                web = tg.create_task(client.detect_web(image_data))
        except ExceptionGroup as eg:
            unavailable = eg.subgroup(VisionServiceUnavailable)
            raise (unavailable or eg).exceptions[0] from eg

        return build_live_classification(
            labels.result(), objects.result(), properties.result(), web.result()
        )

    async def _classify_synthetic(self, image_path: str | Path) -> ClassificationResult:
        try:
            return await asyncio.to_thread(
                generate_synthetic_classification, image_path
            )
        except OSError as e:
            logger.error(
                f"Synthetic classification failed: {e}", image_path=str(image_path)
            )
            return failed_classification(str(e))


def build_image_classifier(settings: VisionSettings | None = None) -> ImageClassifier:
    """Build the classifier once at startup from the environment."""
    settings = settings or VisionSettings()
    api_key = settings.resolve_api_key()

    if api_key is None:
        logger.warning("Google Vision not configured, using synthetic classification")
        return ImageClassifier()

    logger.info("Google Vision classifier initialized")
    return ImageClassifier(
        GoogleVisionClient(
            api_key=api_key,
            url=settings.GOOGLE_VISION_URL,
            timeout=settings.GOOGLE_VISION_TIMEOUT,
        )
    )
