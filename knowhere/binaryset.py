"""Named binary blobs used to serialize indexes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Binary:
    """A blob of bytes with an explicit size."""

    data: bytes = b""
    size: int = -1

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if self.size < 0:
            self.size = len(self.data)


def copy_binary(binary: Binary) -> bytes:
    """Return a fresh copy of the first ``size`` bytes of ``binary``."""
    return bytes(binary.data[: binary.size])


@dataclass
class BinarySet:
    """An ordered mapping from names to :class:`Binary` blobs."""

    binary_map: dict[str, Binary] = field(default_factory=dict)

    def get_by_name(self, name: str) -> Binary:
        """Return the blob under ``name``; raises KeyError if absent."""
        return self.binary_map[name]

    def append(self, name: str, data: Binary | bytes, size: int | None = None) -> None:
        """Store ``data`` under ``name``, replacing any previous blob."""
        if isinstance(data, Binary):
            binary = data if size is None else Binary(data.data, size)
        else:
            binary = Binary(data, len(data) if size is None else size)
        self.binary_map[name] = binary

    def erase(self, name: str) -> Binary | None:
        """Remove and return the blob under ``name``, or None if absent."""
        return self.binary_map.pop(name, None)

    def clear(self) -> None:
        self.binary_map.clear()

    def contains(self, key: str) -> bool:
        return key in self.binary_map

    def __contains__(self, key: object) -> bool:
        return key in self.binary_map

    def __len__(self) -> int:
        return len(self.binary_map)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.binary_map))