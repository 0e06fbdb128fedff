"""Tests for merging classification and vessel lookup results."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.modules.classification.models import ClassificationResult, ColorInfo, Label
from src.modules.classification.service import ImageClassifier
from src.modules.identification.reconciler import (
    IdentificationOutcome,
    IdentificationReconciler,
    build_draft,
)
from src.modules.vessels.demo_directory import DEMO_VESSELS
from src.modules.vessels.models import VesselSearchHints
from src.modules.vessels.service import VesselDirectory

CLASSIFICATION = ClassificationResult(
    boat_type="Yacht",
    brand="Sunseeker",
    model="Sunseeker 40",
    confidence=0.94,
    labels=[Label(name="yacht", confidence=0.94)],
    colors=[ColorInfo(color_value="white", score=0.42)],
)


def _reconciler(classification: ClassificationResult, vessel=None):
    classifier = MagicMock(spec=ImageClassifier)
    classifier.classify = AsyncMock(return_value=classification)
    directory = MagicMock(spec=VesselDirectory)
    directory.lookup = AsyncMock(return_value=vessel)
    return IdentificationReconciler(classifier, directory), directory


@pytest.mark.asyncio
async def test_lookup_uses_classification_hints():
    reconciler, directory = _reconciler(CLASSIFICATION, DEMO_VESSELS[0])

    outcome = await reconciler.identify("/tmp/boat.jpg")

    assert outcome.classification == CLASSIFICATION
    assert outcome.vessel == DEMO_VESSELS[0]
    directory.lookup.assert_awaited_once_with(
        VesselSearchHints(
            type="Yacht",
            labels=CLASSIFICATION.labels,
            colors=CLASSIFICATION.colors,
        )
    )


@pytest.mark.asyncio
async def test_empty_classification_skips_lookup():
    empty = ClassificationResult(boat_type="", confidence=0.0)
    reconciler, directory = _reconciler(empty)

    outcome = await reconciler.identify("/tmp/boat.jpg")

    assert outcome.vessel is None
    assert directory.lookup.await_count == 0


@pytest.mark.asyncio
async def test_labels_alone_trigger_lookup():
    labels_only = ClassificationResult(
        boat_type="", confidence=0.3, labels=[Label(name="boat", confidence=0.3)]
    )
    reconciler, directory = _reconciler(labels_only)

    await reconciler.identify("/tmp/boat.jpg")

    directory.lookup.assert_awaited_once()


def test_build_draft_with_vessel():
    vessel = DEMO_VESSELS[0]
    draft = build_draft(
        "/uploads/boat.jpg",
        IdentificationOutcome(classification=CLASSIFICATION, vessel=vessel),
    )

    assert draft.image_path == "/uploads/boat.jpg"
    assert draft.boat_type == "Yacht"
    assert draft.boat_brand == "Sunseeker"
    assert draft.boat_model == "Sunseeker 40"
    assert draft.confidence == 0.94
    assert draft.vessel_name == "Sea Explorer"
    assert draft.mmsi == "123456789"
    assert draft.registration == "8765432"
    assert draft.length == vessel.length
    assert draft.tonnage == vessel.tonnage
    assert draft.owner == vessel.owner
    assert draft.location == vessel.location


def test_build_draft_without_vessel():
    draft = build_draft(
        "/uploads/boat.jpg",
        IdentificationOutcome(classification=CLASSIFICATION, vessel=None),
    )

    assert draft.vessel_name is None
    assert draft.mmsi is None
    assert draft.registration is None
