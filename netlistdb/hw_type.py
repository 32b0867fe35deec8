"""Hardware types and their values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .bit_utils import mask as _mask


class HwType(ABC):
    """Type of a value carried by a net in the generated circuit."""

    @abstractmethod
    def bit_length(self) -> int:
        """Number of bits required to represent a value of this type."""

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        ...

    @abstractmethod
    def __hash__(self) -> int:
        ...

    def __getitem__(self, size: int) -> "HwArrayType":
        """Return the array type of ``size`` elements of this type."""
        return HwArrayType(self, size)


class HwArrayType(HwType):
    """Fixed-size array of some element type."""

    def __init__(self, elm_t: HwType, size: int) -> None:
        self.elm_t = elm_t
        self.size = size

    def bit_length(self) -> int:
        return self.elm_t.bit_length() * self.size

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HwArrayType):
            return NotImplemented
        return self.size == other.size and self.elm_t == other.elm_t

    def __hash__(self) -> int:
        return hash((HwArrayType, self.elm_t, self.size))

    def __repr__(self) -> str:
        return f"{self.elm_t!r}[{self.size}]"


class HwTypeValue:
    """Base of values of hardware types."""

    def __eq__(self, other: object) -> bool:
        raise TypeError(f"equality is undefined for {type(self).__name__}")

    __hash__ = object.__hash__


class HwIntValue(HwTypeValue):
    """Value of a hardware integer type.

    Bits of ``value`` whose ``mask`` bit is 0 are undefined.
    """

    def __init__(self, t: "HwInt", value: int, mask: Optional[int] = None) -> None:
        if mask is None:
            mask = t.all_mask
        elif mask > t.all_mask:
            raise ValueError("mask is wider than the type")
        self.t = t
        self.value = value
        self.mask = mask

    def __repr__(self) -> str:
        return f"HwIntValue({self.t!r}, {self.value:#x}, mask={self.mask:#x})"


class HwInt(HwType):
    """Hardware integer of a given width and signedness."""

    def __init__(
        self, bit_length: int, is_signed: bool = False, has_to_be_vector: bool = False
    ) -> None:
        self._bit_length = bit_length
        self.all_mask = _mask(bit_length)
        self.is_signed = is_signed
        self.has_to_be_vector = has_to_be_vector

    def bit_length(self) -> int:
        return self._bit_length

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HwType):
            return NotImplemented
        if not isinstance(other, HwInt):
            return False
        if self._bit_length == other._bit_length and self.is_signed == other.is_signed:
            return self._bit_length > 1 or self.has_to_be_vector == other.has_to_be_vector
        return False

    def __hash__(self) -> int:
        return hash((HwInt, self._bit_length, bool(self.is_signed)))

    def __call__(self, ctx, val: int, mask: Optional[int] = None):
        """Create a constant net of this type holding ``val`` in ``ctx``."""
        net = ctx.sig(self, "const_")
        net.val = HwIntValue(self, val, mask)
        return net

    def __repr__(self) -> str:
        sign = "int" if self.is_signed else "uint"
        return f"HwInt<{sign}{self._bit_length}>"


hw_uint64 = HwInt(64, False)
hw_uint32 = HwInt(32, False)
hw_uint16 = HwInt(16, False)
hw_uint8 = HwInt(8, False)
hw_char = HwInt(8, True)

hw_int64 = HwInt(64, True)
hw_int32 = HwInt(32, True)
hw_int16 = HwInt(16, True)
hw_int8 = HwInt(8, True)

hw_bit = HwInt(1, False)
hw_bool = HwInt(1, False)