"""ProducerRoster - the player's producers, keyed by stable handles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from idle import Handle, SnapshotError
from idle_economy.goods import GoodCatalog
from idle_economy.producers import Producer, ProducerCatalog


@dataclass
class RosterEntry:
    producer: Producer
    is_open: bool = False


class ProducerRoster:
    """Sparse handle -> producer mapping.

    Handles come from a counter that only moves forward, so a removed
    handle is never handed out again and UI windows keyed by handle
    cannot collide.
    """

    def __init__(self) -> None:
        self._entries: dict[Handle, RosterEntry] = {}
        self._next_handle: Handle = 0

    @property
    def next_handle(self) -> Handle:
        return self._next_handle

    def add(self, producer: Producer, is_open: bool = False) -> Handle:
        handle = self._next_handle
        self._next_handle += 1
        self._entries[handle] = RosterEntry(producer, is_open)
        return handle

    def remove(self, handle: Handle) -> Producer | None:
        entry = self._entries.pop(handle, None)
        return None if entry is None else entry.producer

    def get(self, handle: Handle) -> Producer:
        return self.entry(handle).producer

    def entry(self, handle: Handle) -> RosterEntry:
        if handle not in self._entries:
            raise KeyError(f"No producer with handle {handle}")
        return self._entries[handle]

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def handles(self) -> list[Handle]:
        return list(self._entries)

    def items(self) -> Iterator[tuple[Handle, Producer]]:
        """Yield ``(handle, producer)`` in handle order."""
        for handle, entry in list(self._entries.items()):
            yield handle, entry.producer

    def producers(self) -> list[Producer]:
        return [entry.producer for entry in self._entries.values()]

    def window_id(
        self,
        handle: Handle,
        catalog: ProducerCatalog | None = None,
        goods: GoodCatalog | None = None,
    ) -> str:
        return f"{handle}: {self.get(handle).display_name(catalog, goods)}"

    def toggle(self, handle: Handle) -> bool:
        """Flip the open flag of a producer's window. Returns the new value."""
        entry = self.entry(handle)
        entry.is_open = not entry.is_open
        return entry.is_open

    def clear(self) -> None:
        """Remove every producer. The handle counter keeps counting."""
        self._entries.clear()

    def replace_with(self, other: ProducerRoster) -> None:
        """Take over the producers and handle counter of *other*."""
        self._entries = dict(other._entries)
        self._next_handle = other._next_handle

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "next_handle": self._next_handle,
            "entries": {
                str(handle): {**entry.producer.to_dict(), "is_open": entry.is_open}
                for handle, entry in self._entries.items()
            },
        }

    def restore(self, data: dict[str, Any]) -> None:
        entries: dict[Handle, RosterEntry] = {}
        for handle_str, fields in data.get("entries", {}).items():
            entries[int(handle_str)] = RosterEntry(
                Producer.from_dict(fields), bool(fields.get("is_open", False))
            )
        next_handle = data.get("next_handle")
        if next_handle is None:
            next_handle = max(entries) + 1 if entries else 0
        elif entries and next_handle <= max(entries):
            raise SnapshotError(
                f"next_handle {next_handle} would reuse handle {max(entries)}"
            )
        self._entries = dict(sorted(entries.items()))
        self._next_handle = next_handle
