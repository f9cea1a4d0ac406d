"""Read-only view over a packed bitset."""

from __future__ import annotations


class BitsetView:
    """A view of ``num_bits`` bits packed little-endian in ``data``."""

    __slots__ = ("_bits", "_num_bits")

    def __init__(self, data: bytes | bytearray | memoryview | None = None, num_bits: int = 0) -> None:
        if data is None:
            self._bits = b""
            self._num_bits = 0
            return
        self._bits = data
        self._num_bits = num_bits
        if len(data) < self.byte_size():
            raise ValueError("bitset data is shorter than num_bits requires")

    def empty(self) -> bool:
        return self._num_bits == 0

    def size(self) -> int:
        return self._num_bits

    def byte_size(self) -> int:
        return (self._num_bits + 7) >> 3

    def data(self) -> bytes | bytearray | memoryview:
        return self._bits

    def test(self, index: int) -> bool:
        """Return whether bit ``index`` is set."""
        return bool(self._bits[index >> 3] & (1 << (index & 7)))

    def count(self) -> int:
        """Number of set bits across all bytes covered by the view."""
        return int.from_bytes(bytes(self._bits[: self.byte_size()]), "little").bit_count()

    def to_string(self, start: int, stop: int) -> str:
        """Render bits ``start`` up to ``stop`` as '0'/'1' characters."""
        if self.empty():
            return ""
        stop = min(stop, self._num_bits)
        return "".join("1" if self.test(i) else "0" for i in range(start, stop))

    def __len__(self) -> int:
        return self._num_bits

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 0 <= index < self._num_bits and self.test(index)