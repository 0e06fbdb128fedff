"""Classification result models."""

from pydantic import Field

from src.api.core.messages import CamelModel


class Label(CamelModel):
    name: str
    confidence: float


class ColorInfo(CamelModel):
    color_value: str  # "#rrggbb" or a color name on the synthetic path
    score: float


class ScoredEntity(CamelModel):
    """A detected object or a related web entity."""

    name: str
    confidence: float


class SyntheticAttributes(CamelModel):
    """Cosmetic details only the synthetic classifier can fill in."""

    estimated_length: str
    estimated_value: str
    hull_material: str
    engine_type: str
    registry_id: str
    home_port: str
    year_built: int
    possible_names: list[str]


class ClassificationResult(CamelModel):
    """Normalized classifier output. Always produced, even on failure."""

    boat_type: str
    brand: str | None = None
    model: str | None = None
    confidence: float = Field(ge=0.0, le=1.0)
    description: str | None = None
    labels: list[Label] = Field(default_factory=list)
    colors: list[ColorInfo] = Field(default_factory=list)
    detected_objects: list[ScoredEntity] = Field(default_factory=list)
    similar_entities: list[ScoredEntity] = Field(default_factory=list)
    attributes: SyntheticAttributes | None = None
    raw_error: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to search a vessel registry with."""
        return not self.boat_type and not self.labels
