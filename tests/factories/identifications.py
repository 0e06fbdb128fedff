"""Factory for Identification models."""

import factory

from src.database.models import Identification
from .base import AsyncSQLAlchemyModelFactory


class IdentificationFactory(AsyncSQLAlchemyModelFactory[Identification]):
    """Factory for creating Identification instances."""

    class Meta:
        model = Identification

    image_path = factory.Sequence(lambda n: f"/uploads/boat-{n}.jpg")
    boat_type = factory.Faker(
        "random_element", elements=["Yacht", "Sailboat", "Speedboat", "Ferry"]
    )
    boat_brand = factory.Faker(
        "random_element", elements=["Sea Ray", "Beneteau", "Sunseeker", None]
    )
    boat_model = factory.Faker("word")
    confidence = factory.Faker(
        "pyfloat", min_value=0, max_value=1, right_digits=4
    )
    vessel_name = factory.Faker("company")
    mmsi = factory.Faker("numerify", text="#########")
    registration = factory.Faker("numerify", text="#######")
    length = "25m"
    tonnage = "120 GT"
    owner = factory.Faker("name")
    location = factory.Faker("city")
