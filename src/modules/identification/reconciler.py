"""Merges classifier and vessel directory output into one identification."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from src.modules.classification.models import ClassificationResult
from src.modules.classification.service import ImageClassifier
from src.modules.vessels.models import VesselRecord, VesselSearchHints
from src.modules.vessels.service import VesselDirectory
from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class IdentificationOutcome:
    classification: ClassificationResult
    vessel: VesselRecord | None


class IdentificationDraft(BaseModel):
    """Transient record handed unmodified to the store."""

    image_path: str | None = None
    boat_type: str | None = None
    boat_brand: str | None = None
    boat_model: str | None = None
    confidence: float | None = None
    vessel_name: str | None = None
    mmsi: str | None = None
    registration: str | None = None
    length: str | None = None
    tonnage: str | None = None
    owner: str | None = None
    location: str | None = None


class IdentificationReconciler:
    def __init__(self, classifier: ImageClassifier, directory: VesselDirectory):
        self.classifier = classifier
        self.directory = directory

    async def identify(self, image_path: str | Path) -> IdentificationOutcome:
        classification = await self.classifier.classify(image_path)

        if classification.is_empty:
            logger.info("Nothing to search the vessel directory with")
            return IdentificationOutcome(classification=classification, vessel=None)

        vessel = await self.directory.lookup(
            VesselSearchHints(
                type=classification.boat_type,
                labels=classification.labels,
                colors=classification.colors,
            )
        )
        return IdentificationOutcome(classification=classification, vessel=vessel)


def build_draft(
    image_url: str, outcome: IdentificationOutcome
) -> IdentificationDraft:
    classification = outcome.classification
    vessel = outcome.vessel

    draft = IdentificationDraft(
        image_path=image_url,
        boat_type=classification.boat_type,
        boat_brand=classification.brand,
        boat_model=classification.model,
        confidence=classification.confidence,
    )
    if vessel is not None:
        draft.vessel_name = vessel.name
        draft.mmsi = vessel.mmsi
        draft.registration = vessel.imo
        draft.length = vessel.length
        draft.tonnage = vessel.tonnage
        draft.owner = vessel.owner
        draft.location = vessel.location
    return draft
