"""
Collection names and the empty document shape of each collection.
"""


class Collections:
    """Collection names in the data directory."""
    USERS = "users"
    EVENTS = "events"
    GALLERY = "gallery"
    MESSAGES = "messages"
    REGISTRATIONS = "registrations"


# Users and registrations are mappings, everything else is an ordered list
COLLECTION_SHAPES: dict[str, type] = {
    Collections.USERS: dict,
    Collections.EVENTS: list,
    Collections.GALLERY: list,
    Collections.MESSAGES: list,
    Collections.REGISTRATIONS: dict,
}

ALL_COLLECTIONS = list(COLLECTION_SHAPES)


def empty_document(collection: str) -> dict | list:
    """Return a fresh empty document of the collection's shape."""
    return COLLECTION_SHAPES[collection]()
