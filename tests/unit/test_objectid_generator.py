"""Tests for ObjectIdGenerator class."""

import re

import pytest
from conftest import FixedClock, ScriptedRandom

from idgen import InvalidArgument, InvalidTimestamp, ObjectIdGenerator

MACHINE = bytes.fromhex("0102030405")


def make_generator(counter_start: int, clock=None) -> ObjectIdGenerator:
    rng = ScriptedRandom(MACHINE + counter_start.to_bytes(3, "big"))
    return ObjectIdGenerator(clock=clock, rng=rng)


class TestObjectIdGeneratorInit:
    """Tests for ObjectIdGenerator.__init__()."""

    def test_machine_and_counter_drawn_once(self) -> None:
        """Test that the machine component and counter start come from the random source."""
        generator = make_generator(7)

        assert generator.machine == MACHINE
        assert generator.counter == 7

    def test_independent_instances(self) -> None:
        """Test that separate instances own separate state."""
        first = ObjectIdGenerator()
        second = ObjectIdGenerator()
        first.generate()

        assert first.machine != second.machine


class TestObjectIdGeneratorGenerate:
    """Tests for ObjectIdGenerator.generate()."""

    def test_generate_layout(self) -> None:
        """Test timestamp, machine and counter positions."""
        value = make_generator(1).generate(timestamp=1609459200)

        assert str(value) == "5fee6600" + "0102030405" + "000001"
        assert value.timestamp == 1609459200
        assert value.machine == MACHINE
        assert value.counter == 1

    def test_generate_from_clock(self) -> None:
        """Test conversion from nanoseconds to seconds."""
        generator = make_generator(0, clock=FixedClock(1_609_459_200_999_999_999))

        assert generator.generate().timestamp == 1609459200

    def test_generate_text_shape(self) -> None:
        """Test 24 lower-case hex characters."""
        assert re.match(r"^[0-9a-f]{24}$", str(ObjectIdGenerator().generate()))

    def test_counter_increments(self) -> None:
        """Test consecutive counters with fixed timestamp and machine."""
        values = make_generator(100).generate_batch(5, timestamp=1)

        assert [value.counter for value in values] == [100, 101, 102, 103, 104]
        assert {value.timestamp for value in values} == {1}
        assert {value.machine for value in values} == {MACHINE}

    def test_counter_wraps(self) -> None:
        """Test modulo 2**24 wrap-around without error."""
        values = make_generator(0xFFFFFE).generate_batch(3, timestamp=1)

        assert [value.counter for value in values] == [0xFFFFFE, 0xFFFFFF, 0]

    def test_ordered_within_second(self) -> None:
        """Test that same-second identifiers sort by counter."""
        texts = [str(value) for value in make_generator(0).generate_batch(10, timestamp=5)]

        assert texts == sorted(texts)

    @pytest.mark.parametrize("timestamp", [-1, 1 << 32, 2.5])
    def test_invalid_timestamp(self, timestamp) -> None:
        """Test that timestamps must fit in 32 bits."""
        with pytest.raises(InvalidTimestamp):
            make_generator(0).generate(timestamp=timestamp)

    def test_invalid_timestamp_keeps_counter(self) -> None:
        """Test that a failed generation does not consume a counter value."""
        generator = make_generator(9)
        with pytest.raises(InvalidTimestamp):
            generator.generate(timestamp=-1)

        assert generator.generate(timestamp=0).counter == 9

    def test_maximum_timestamp(self) -> None:
        """Test the largest 32-bit timestamp."""
        value = make_generator(0).generate(timestamp=(1 << 32) - 1)

        assert str(value).startswith("ffffffff")

    def test_batch_negative(self) -> None:
        """Test that a negative count is rejected."""
        with pytest.raises(InvalidArgument):
            make_generator(0).generate_batch(-1)

    def test_empty_batch_invalid_timestamp(self) -> None:
        """Test that the timestamp is checked even when nothing is generated."""
        generator = make_generator(3)
        with pytest.raises(InvalidTimestamp):
            generator.generate_batch(0, timestamp=1 << 32)

        assert generator.counter == 3
