API_VERSION_HEADER = "X-Boat-Identifier-Version"

ALLOWED_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp")
ALLOWED_IMAGE_TYPES = [
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
]
DEFAULT_IMAGE_EXTENSION = ".jpg"
