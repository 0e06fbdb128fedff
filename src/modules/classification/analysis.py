"""Turn raw Vision annotations into a ClassificationResult."""

from typing import Any, Iterable, Mapping

from src.modules.classification.catalog import (
    BOAT_TYPE_KEYWORDS,
    BOAT_TYPES_BY_NAME,
    BRAND_KEYWORDS,
    DETECTED_OBJECT_ALLOW_LIST,
    FAILED_BOAT_TYPE,
    FALLBACK_CONFIDENCE,
    MAX_COLORS,
    MAX_DETECTED_OBJECTS,
    MAX_LABELS,
    MAX_SIMILAR_ENTITIES,
    RELEVANT_LABEL_KEYWORDS,
    UNKNOWN_BOAT_TYPE,
    WEB_ENTITY_KEYWORDS,
)
from src.modules.classification.models import (
    ClassificationResult,
    ColorInfo,
    Label,
    ScoredEntity,
)

TYPE_WEIGHT = 0.4
LABEL_WEIGHT = 0.4
BRAND_WEIGHT = 0.2


def _clamp(score: float) -> float:
    return max(0.0, min(1.0, float(score)))


def best_keyword_match(
    labels: Iterable[Label], table: Mapping[str, Iterable[str]]
) -> tuple[str | None, float]:
    """Pick the table entry whose best keyword hit has the highest label score.

    A keyword hits a label when the lower-cased label text contains it.
    Comparison is strictly greater, so the first entry in table order wins ties.
    """
    labels = list(labels)
    best_name: str | None = None
    best_score = 0.0

    for name, keywords in table.items():
        entry_score = 0.0
        for label in labels:
            text = label.name.lower()
            if any(keyword in text for keyword in keywords):
                entry_score = max(entry_score, label.confidence)
        if entry_score > best_score:
            best_name = name
            best_score = entry_score

    return best_name, best_score


def is_relevant_label(label: Label) -> bool:
    text = label.name.lower()
    return any(keyword in text for keyword in RELEVANT_LABEL_KEYWORDS)


def blend_confidence(
    labels: list[Label], type_score: float, brand_score: float
) -> float:
    """Weighted blend of top relevant label, type match and brand match."""
    relevant = [label.confidence for label in labels if is_relevant_label(label)]
    top_label = max(relevant) if relevant else FALLBACK_CONFIDENCE
    blended = (
        LABEL_WEIGHT * top_label
        + TYPE_WEIGHT * type_score
        + BRAND_WEIGHT * brand_score
    )
    return round(_clamp(blended), 4)


def parse_labels(response: Mapping[str, Any]) -> list[Label]:
    return [
        Label(name=item["description"], confidence=_clamp(item.get("score", 0.0)))
        for item in response.get("labelAnnotations", [])
        if item.get("description")
    ]


def parse_colors(response: Mapping[str, Any]) -> list[ColorInfo]:
    dominant = (
        response.get("imagePropertiesAnnotation", {})
        .get("dominantColors", {})
        .get("colors", [])
    )
    colors = []
    for item in dominant[:MAX_COLORS]:
        rgb = item.get("color", {})
        color_value = "#{:02x}{:02x}{:02x}".format(
            int(rgb.get("red", 0)), int(rgb.get("green", 0)), int(rgb.get("blue", 0))
        )
        colors.append(
            ColorInfo(color_value=color_value, score=_clamp(item.get("score", 0.0)))
        )
    return colors


def parse_detected_objects(response: Mapping[str, Any]) -> list[ScoredEntity]:
    objects = []
    for item in response.get("localizedObjectAnnotations", []):
        name = item.get("name", "")
        if name.lower() not in DETECTED_OBJECT_ALLOW_LIST:
            continue
        objects.append(
            ScoredEntity(name=name, confidence=_clamp(item.get("score", 0.0)))
        )
        if len(objects) == MAX_DETECTED_OBJECTS:
            break
    return objects


def parse_similar_entities(response: Mapping[str, Any]) -> list[ScoredEntity]:
    """Web entities whose text relates to boats.

    Web entity scores are not normalized by the service, so they are clamped.
    """
    related_keywords = WEB_ENTITY_KEYWORDS + tuple(
        keyword
        for keywords in (*BOAT_TYPE_KEYWORDS.values(), *BRAND_KEYWORDS.values())
        for keyword in keywords
    )
    entities = []
    for item in response.get("webDetection", {}).get("webEntities", []):
        name = item.get("description")
        if not name:
            continue
        text = name.lower()
        if not any(keyword in text for keyword in related_keywords):
            continue
        entities.append(
            ScoredEntity(name=name, confidence=_clamp(item.get("score", 0.0)))
        )
        if len(entities) == MAX_SIMILAR_ENTITIES:
            break
    return entities


def build_live_classification(
    label_response: Mapping[str, Any],
    object_response: Mapping[str, Any],
    properties_response: Mapping[str, Any],
    web_response: Mapping[str, Any],
) -> ClassificationResult:
    """Merge the four annotation responses for one image."""
    labels = parse_labels(label_response)

    boat_type, type_score = best_keyword_match(labels, BOAT_TYPE_KEYWORDS)
    brand, brand_score = best_keyword_match(labels, BRAND_KEYWORDS)

    profile = BOAT_TYPES_BY_NAME.get(boat_type) if boat_type else None

    return ClassificationResult(
        boat_type=boat_type or UNKNOWN_BOAT_TYPE,
        brand=brand,
        model=None,
        confidence=blend_confidence(labels, type_score, brand_score),
        description=profile.description if profile else None,
        labels=labels[:MAX_LABELS],
        colors=parse_colors(properties_response),
        detected_objects=parse_detected_objects(object_response),
        similar_entities=parse_similar_entities(web_response),
    )


def failed_classification(error: str) -> ClassificationResult:
    """Minimal result returned when the live analysis breaks part-way."""
    return ClassificationResult(
        boat_type=FAILED_BOAT_TYPE,
        confidence=FALLBACK_CONFIDENCE,
        labels=[Label(name="Watercraft", confidence=FALLBACK_CONFIDENCE)],
        raw_error=error,
    )
