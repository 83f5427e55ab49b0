"""Spatial queries: what a ship is touching.

The motion engine never looks at the board itself. It asks a SpatialQuery for
the contacts at a position, so tests can hand it a fixed contact list and the
game can hand it a BoardContacts built from the real planets and ships.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Protocol, Union

from ..models.coordinates import AxialPoint
from ..models.planet import GravityField, Planet
from ..models.ship import Ship


class ContactCategory(IntFlag):
    """Category bits of bodies that can overlap a ship."""

    SHIP = 1
    PLANET = 2
    GRAVITY_FIELD = 4
    ACCELERATION_CONTROL = 8


# What a ship reacts to
SHIP_CONTACT_MASK = ContactCategory.PLANET | ContactCategory.GRAVITY_FIELD


@dataclass(frozen=True)
class Contact:
    """A body overlapping a queried position."""

    category: ContactCategory
    body: Union[Ship, Planet, GravityField]

    @property
    def name(self) -> str:
        return self.body.name


class SpatialQuery(Protocol):
    """Read-only spatial lookup consumed by the motion engine."""

    def contacts_at(self, position: AxialPoint) -> list[Contact]:
        ...

    def fields_overlapping(self, position: AxialPoint) -> list[GravityField]:
        ...


def gravity_fields(contacts: Iterable[Contact]) -> list[GravityField]:
    """Filter contacts down to gravity wedges, keeping order."""
    return [c.body for c in contacts if c.category is ContactCategory.GRAVITY_FIELD]


class BoardContacts:
    """SpatialQuery over a static board of planets and ships.

    Each planet and wedge covers exactly one hex. Results are ordered by
    planet order, then wedge direction order, then ships.
    """

    def __init__(self, planets: Iterable[Planet], ships: Iterable[Ship] = ()):
        self.planets = list(planets)
        self.ships = list(ships)

    def contacts_at(
        self, position: AxialPoint, mask: ContactCategory = SHIP_CONTACT_MASK | ContactCategory.SHIP
    ) -> list[Contact]:
        """Return the bodies at position whose category is in mask."""
        contacts = []
        for planet in self.planets:
            if ContactCategory.PLANET & mask and planet.position == position:
                contacts.append(Contact(ContactCategory.PLANET, planet))
            if ContactCategory.GRAVITY_FIELD & mask:
                contacts.extend(
                    Contact(ContactCategory.GRAVITY_FIELD, g)
                    for g in planet.gravity_fields
                    if g.position == position
                )
        if ContactCategory.SHIP & mask:
            contacts.extend(
                Contact(ContactCategory.SHIP, ship)
                for ship in self.ships
                if ship.position == position
            )
        return contacts

    def fields_overlapping(self, position: AxialPoint) -> list[GravityField]:
        return gravity_fields(self.contacts_at(position, ContactCategory.GRAVITY_FIELD))


class StaticContacts:
    """SpatialQuery that reports the same fields everywhere."""

    def __init__(self, fields: Iterable[GravityField] = ()):
        self.fields = list(fields)

    def contacts_at(self, position: AxialPoint) -> list[Contact]:
        return [Contact(ContactCategory.GRAVITY_FIELD, g) for g in self.fields]

    def fields_overlapping(self, position: AxialPoint) -> list[GravityField]:
        return list(self.fields)
