"""Generator boundary: how value-producing code meets a bitstream."""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .bitstream import BitStream


@dataclass
class Slot:
    """Destination cell for one element of an unpacked value."""
    value: Any = None


def unpack_tuple(value: tuple, slots: Sequence[Slot]) -> None:
    """Store each element of value into the matching slot.

    Args:
        value: Tuple produced by a generator
        slots: One slot per element, in order
    """
    if not isinstance(value, tuple):
        raise ValueError(f"Cannot unpack {type(value).__name__} into {len(slots)} slots")
    if len(value) != len(slots):
        raise ValueError(f"Cannot unpack {len(value)} values into {len(slots)} slots")
    for slot, element in zip(slots, value):
        slot.value = element


class Generator:
    """A labelled drawing function.

    The label names the group that brackets every draw, so the shrinker can
    see (and try to remove) each generated value as a unit.
    """

    def __init__(self, label: str, draw: Callable[[BitStream], Any], removable: bool = True):
        self.label = label
        self.draw = draw
        self.removable = removable

    def value(self, stream: BitStream, label: Optional[str] = None) -> Any:
        """Draw one value from stream inside its own group."""
        handle = stream.begin_group(label or self.label, self.removable)
        v = self.draw(stream)
        stream.end_group(handle, False)
        return v

    def __repr__(self) -> str:
        return f"Generator({self.label!r})"


class BitStreamData:
    """What a property body sees: draws values from one stream."""

    def __init__(self, stream: BitStream):
        self.stream = stream

    def draw(self, generator: Generator, label: str, *slots: Slot) -> Any:
        """Draw a value, optionally unpacking a tuple result into slots.

        Args:
            generator: Generator to draw from
            label: Group label for this draw
            *slots: Destination slots for the tuple elements

        Returns:
            The drawn value
        """
        v = generator.value(self.stream, label)

        if slots:
            unpack_tuple(v, slots)

        return v
