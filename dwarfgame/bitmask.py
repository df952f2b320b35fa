"""32-bit mask of flags, used to record which components an entity holds."""

from __future__ import annotations

from dataclasses import dataclass

_WIDTH_MASK = 0xFFFFFFFF


@dataclass
class Bitmask:
    """A mutable set of up to 32 bit flags."""

    mask: int = 0

    def __post_init__(self) -> None:
        self.mask &= _WIDTH_MASK

    def match(self, other: Bitmask, relevant: int = 0) -> bool:
        """Compare with ``other``, limited to the ``relevant`` bits if given."""
        if relevant:
            return (other.mask & relevant) == (self.mask & relevant)
        return other.mask == self.mask

    def contains(self, other: Bitmask) -> bool:
        """True when every bit set in ``other`` is also set here."""
        return other.mask == (self.mask & other.mask)

    def get_bit(self, pos: int) -> bool:
        return bool(self.mask & (1 << pos))

    def turn_on_bit(self, pos: int) -> None:
        self.mask = (self.mask | (1 << pos)) & _WIDTH_MASK

    def turn_on_bits(self, bits: int) -> None:
        self.mask = (self.mask | bits) & _WIDTH_MASK

    def clear_bit(self, pos: int) -> None:
        self.mask &= ~(1 << pos) & _WIDTH_MASK

    def toggle_bit(self, pos: int) -> None:
        self.mask = (self.mask ^ (1 << pos)) & _WIDTH_MASK

    def clear(self) -> None:
        self.mask = 0