"""Tests for the generator boundary."""

import pytest
from shrinkstream.bitstream import BufferedBitStream, RandomBitStream
from shrinkstream.data import Generator, BitStreamData, Slot, unpack_tuple
from shrinkstream.errors import InvariantViolation


def byte_pair(stream):
    return (stream.draw_bits(8), stream.draw_bits(8))


class TestUnpackTuple:
    def test_fills_slots(self):
        a, b = Slot(), Slot()
        unpack_tuple((1, "x"), [a, b])
        assert a.value == 1
        assert b.value == "x"

    def test_arity_mismatch(self):
        with pytest.raises(ValueError, match="2 values into 3 slots"):
            unpack_tuple((1, 2), [Slot(), Slot(), Slot()])

    def test_not_a_tuple(self):
        with pytest.raises(ValueError):
            unpack_tuple([1, 2], [Slot(), Slot()])


class TestGenerator:
    def test_value_brackets_group(self):
        stream = BufferedBitStream([0x12, 0x34], persist=True)
        gen = Generator("pair", byte_pair)
        assert gen.value(stream) == (0x12, 0x34)

        [group] = stream.recorder.groups
        assert (group.label, group.begin, group.end) == ("pair", 0, 2)
        assert group.removable
        assert not group.discard

    def test_label_override(self):
        stream = BufferedBitStream([1, 2], persist=True)
        Generator("pair", byte_pair).value(stream, "point")
        assert stream.recorder.groups[0].label == "point"

    def test_generator_drawing_nothing_is_fatal(self):
        stream = RandomBitStream(seed=1)
        gen = Generator("const", lambda s: 0)
        with pytest.raises(InvariantViolation):
            gen.value(stream)

    def test_nested_generators(self):
        inner = Generator("byte", lambda s: s.draw_bits(8))
        outer = Generator("two", lambda s: [inner.value(s), inner.value(s)])
        stream = BufferedBitStream([7, 9], persist=True)
        assert outer.value(stream) == [7, 9]
        assert [(g.label, g.begin, g.end) for g in stream.recorder.groups] == [
            ("two", 0, 2),
            ("byte", 0, 1),
            ("byte", 1, 2),
        ]


class TestBitStreamData:
    def test_draw_returns_value(self):
        data = BitStreamData(BufferedBitStream([3, 4]))
        assert data.draw(Generator("pair", byte_pair), "p") == (3, 4)

    def test_draw_unpacks_into_slots(self):
        data = BitStreamData(BufferedBitStream([3, 4]))
        x, y = Slot(), Slot()
        data.draw(Generator("pair", byte_pair), "p", x, y)
        assert (x.value, y.value) == (3, 4)

    def test_draw_is_reproducible_from_seed(self):
        gen = Generator("pair", byte_pair)
        a = BitStreamData(RandomBitStream(seed=5))
        b = BitStreamData(RandomBitStream(seed=5))
        assert [a.draw(gen, "p") for _ in range(10)] == [b.draw(gen, "p") for _ in range(10)]
