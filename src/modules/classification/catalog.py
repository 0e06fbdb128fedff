"""Fixed lookup tables used by both the live and the synthetic classifier."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoatTypeProfile:
    name: str
    keywords: tuple[str, ...]
    default_confidence: float
    description: str


# Table order matters: on equal match scores the earlier type wins.
BOAT_TYPES: tuple[BoatTypeProfile, ...] = (
    BoatTypeProfile(
        "Yacht",
        ("yacht", "luxury yacht", "superyacht", "motor yacht"),
        0.94,
        "Luxury motor yacht with sleek design",
    ),
    BoatTypeProfile(
        "Sailboat",
        ("sailboat", "sailing", "sailing ship", "sloop", "schooner", "keelboat"),
        0.91,
        "Classic sailing vessel with mainsail and jib",
    ),
    BoatTypeProfile(
        "Speedboat",
        ("speedboat", "powerboat", "motorboat", "jet boat", "racing boat"),
        0.88,
        "High-performance powerboat",
    ),
    BoatTypeProfile(
        "Fishing Boat",
        ("fishing boat", "fishing vessel", "trawler", "fishing trawler"),
        0.85,
        "Commercial fishing vessel",
    ),
    BoatTypeProfile(
        "Cruise Ship",
        ("cruise ship", "cruise liner", "ocean liner", "passenger ship"),
        0.97,
        "Large passenger cruise liner",
    ),
    BoatTypeProfile(
        "Cargo Ship",
        ("cargo ship", "container ship", "freighter", "bulk carrier", "tanker"),
        0.93,
        "Container cargo vessel",
    ),
    BoatTypeProfile(
        "Catamaran",
        ("catamaran", "multihull", "trimaran"),
        0.89,
        "Twin-hull sailing or power catamaran",
    ),
    BoatTypeProfile(
        "Tugboat",
        ("tugboat", "tug", "towboat"),
        0.86,
        "Powerful harbor tugboat",
    ),
    BoatTypeProfile(
        "Ferry",
        ("ferry", "passenger ferry", "car ferry"),
        0.90,
        "Passenger and vehicle ferry",
    ),
    BoatTypeProfile(
        "Dinghy",
        ("dinghy", "rowboat", "rowing", "inflatable boat", "skiff"),
        0.82,
        "Small recreational boat",
    ),
)

BOAT_TYPES_BY_NAME: dict[str, BoatTypeProfile] = {t.name: t for t in BOAT_TYPES}

BOAT_TYPE_KEYWORDS: dict[str, tuple[str, ...]] = {
    t.name: t.keywords for t in BOAT_TYPES
}

BRAND_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Sea Ray": ("sea ray", "searay", "sundancer"),
    "Bayliner": ("bayliner",),
    "Boston Whaler": ("boston whaler", "whaler"),
    "Beneteau": ("beneteau", "bénéteau", "oceanis"),
    "Jeanneau": ("jeanneau", "sun odyssey"),
    "Sunseeker": ("sunseeker",),
    "Azimut": ("azimut",),
    "Ferretti": ("ferretti",),
    "Princess": ("princess yachts", "princess"),
    "Nautique": ("nautique", "correct craft"),
    "MasterCraft": ("mastercraft",),
    "Malibu": ("malibu boats", "malibu"),
    "Riva": ("riva", "aquarama"),
    "Lagoon": ("lagoon catamaran", "lagoon"),
}

BRANDS: tuple[str, ...] = tuple(BRAND_KEYWORDS)

# A label counts towards the top-label confidence only if it mentions one of these
RELEVANT_LABEL_KEYWORDS: tuple[str, ...] = (
    "boat",
    "ship",
    "vessel",
    "yacht",
    "sail",
    "maritime",
    "nautical",
)

DETECTED_OBJECT_ALLOW_LIST: frozenset[str] = frozenset(
    {"boat", "ship", "watercraft", "sailboat", "yacht", "vehicle", "kayak", "canoe"}
)

WEB_ENTITY_KEYWORDS: tuple[str, ...] = RELEVANT_LABEL_KEYWORDS + (
    "watercraft",
    "marine",
    "boating",
    "yachting",
    "ferry",
    "catamaran",
)

MAX_LABELS = 10
MAX_COLORS = 10
MAX_DETECTED_OBJECTS = 10
MAX_SIMILAR_ENTITIES = 5

# Synthetic attribute tables
HOME_PORTS: tuple[str, ...] = (
    "Mediterranean Sea",
    "Caribbean",
    "Pacific Ocean",
    "Atlantic Ocean",
    "Gulf of Mexico",
    "Marina del Rey",
    "Miami Beach",
    "Monaco",
    "Sydney Harbour",
    "Cannes",
)

HULL_MATERIALS: tuple[str, ...] = ("Fiberglass", "Steel", "Aluminum", "Wood")

ENGINE_TYPES: tuple[str, ...] = ("Inboard", "Outboard", "Inboard/Outboard", "Jet")

NAME_PREFIXES: tuple[str, ...] = ("Sea", "My", "Blue", "Ocean", "Wind")

NAME_SUFFIXES: tuple[str, ...] = (
    "Dream",
    "Breeze",
    "Wanderer",
    "Explorer",
    "Spirit",
    "Destiny",
    "Escape",
    "Paradise",
)

SYNTHETIC_COLORS: tuple[tuple[str, float], ...] = (
    ("white", 0.42),
    ("blue", 0.27),
    ("navy", 0.18),
    ("cream", 0.13),
)

SYNTHETIC_OBJECTS: tuple[str, ...] = ("Boat", "Watercraft")

FAILED_BOAT_TYPE = "Boat (Analysis Failed)"
UNKNOWN_BOAT_TYPE = "Unknown"
FALLBACK_CONFIDENCE = 0.5
