"""Game engine components."""

from .gravity import BoardContacts, Contact, ContactCategory, SpatialQuery, StaticContacts
from .map_generator import generate_map
from .turn_executor import CommandExecutor, CommandResult

__all__ = [
    "BoardContacts",
    "CommandExecutor",
    "CommandResult",
    "Contact",
    "ContactCategory",
    "SpatialQuery",
    "StaticContacts",
    "generate_map",
]
