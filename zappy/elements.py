"""Resource elements found on the map and their target densities."""

from __future__ import annotations

from enum import IntEnum


class Element(IntEnum):
    """Kinds of resource that can lie on a tile or sit in an inventory."""

    UNKNOWN = -1
    FOOD = 0
    LINEMATE = 1
    DERAUMERE = 2
    SIBUR = 3
    MENDIANE = 4
    PHIRAS = 5
    THYSTAME = 6


RESOURCES: tuple[Element, ...] = tuple(
    element for element in Element if element is not Element.UNKNOWN
)
"""Every real resource, in protocol order."""

ELEMENTS_QUANTITY = len(RESOURCES)

DENSITY: dict[Element, float] = {
    Element.FOOD: 0.5,
    Element.LINEMATE: 0.3,
    Element.DERAUMERE: 0.15,
    Element.SIBUR: 0.1,
    Element.MENDIANE: 0.1,
    Element.PHIRAS: 0.08,
    Element.THYSTAME: 0.05,
}
"""Target amount of each resource per tile when the map is generated."""

_NAMES: dict[Element, str] = {element: element.name.lower() for element in RESOURCES}
_BY_NAME: dict[str, Element] = {name: element for element, name in _NAMES.items()}


def element_name(element: int) -> str:
    """Return the lower-case protocol name of an element, or "unknown"."""
    try:
        return _NAMES.get(Element(element), "unknown")
    except ValueError:
        return "unknown"


def element_from_str(text: str | None) -> Element:
    """Look an element up by name, ignoring case; unknown names give UNKNOWN."""
    if text is None:
        return Element.UNKNOWN
    return _BY_NAME.get(text.lower(), Element.UNKNOWN)