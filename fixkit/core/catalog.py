"""Static, ordered registry of menu selectors and their operations."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from fixkit.core.errors import CatalogError, SelectionError

if TYPE_CHECKING:
    from fixkit.core.operations import Operation

QUIT_SELECTOR = "Q"


def normalize_selector(selector: str) -> str:
    return selector.strip().upper()


def order_key(selector: str) -> Tuple[int, int, str]:
    """Sort key: numeric selectors by value first, then letters lexically."""
    key = normalize_selector(selector)
    if key.isdigit():
        return (0, int(key), "")
    return (1, 0, key)


@dataclass(frozen=True)
class MenuEntry:
    selector: str
    label: str
    operation: "Operation"


@dataclass
class CatalogSection:
    """Group of entries shown together in the help viewer."""

    title: str
    description: str
    selectors: List[str] = field(default_factory=list)


class OperationCatalog:
    """Selector -> operation mapping, frozen once startup registration ends."""

    def __init__(self) -> None:
        self._entries: Dict[str, MenuEntry] = {}
        self._closed = False
        self.sections: List[CatalogSection] = []

    def register(self, selector: str, label: str, operation: "Operation") -> MenuEntry:
        if self._closed:
            raise CatalogError("Catalog is closed; operations can only be registered at startup")
        key = normalize_selector(selector)
        if not (key.isdigit() or (len(key) == 1 and key.isalpha())):
            raise CatalogError(f"Invalid selector {selector!r}: use a number or a single letter")
        if key == QUIT_SELECTOR:
            raise CatalogError(f"Selector {QUIT_SELECTOR!r} is reserved for quit")
        if key.isdigit():
            key = str(int(key))
        if key in self._entries:
            existing = self._entries[key]
            raise CatalogError(f"Selector {key!r} already registered for {existing.label!r}")
        entry = MenuEntry(selector=key, label=label, operation=operation)
        self._entries[key] = entry
        return entry

    def add_section(self, title: str, description: str, selectors: List[str]) -> None:
        self.sections.append(CatalogSection(title, description, [normalize_selector(s) for s in selectors]))

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def _key(self, selector: str) -> str:
        key = normalize_selector(selector)
        if key.isdigit():
            key = str(int(key))
        return key

    def entry(self, selector: str) -> Optional[MenuEntry]:
        return self._entries.get(self._key(selector))

    def lookup(self, selector: str) -> Optional["Operation"]:
        """Return the operation for ``selector`` or None when it is not registered."""
        entry = self.entry(selector)
        return entry.operation if entry else None

    def require(self, selector: str) -> MenuEntry:
        entry = self.entry(selector)
        if entry is None:
            raise SelectionError(selector)
        return entry

    def ordered_entries(self) -> List[MenuEntry]:
        return sorted(self._entries.values(), key=lambda e: order_key(e.selector))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, selector: str) -> bool:
        return self.entry(selector) is not None
