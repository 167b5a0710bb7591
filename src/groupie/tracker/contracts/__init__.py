"""Public contracts for the artist detail renderer."""
from groupie.tracker.contracts.entity import (
    Entity,
    IdentifierEntry,
    JsonKind,
    PREFERRED_FIELDS,
    display_string,
    json_kind,
    normalize_entity,
)
from groupie.tracker.contracts.render import (
    Element,
    Node,
    Placeholder,
    PlaceholderArena,
    PlaceholderSlot,
    SlotAlreadySettled,
    SlotState,
    Text,
    element,
)

__all__ = [
    "Entity", "IdentifierEntry", "JsonKind", "PREFERRED_FIELDS",
    "display_string", "json_kind", "normalize_entity",
    "Element", "Node", "Placeholder", "Text", "element",
    "PlaceholderArena", "PlaceholderSlot", "SlotAlreadySettled", "SlotState",
]
