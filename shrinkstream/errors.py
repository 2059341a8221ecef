"""Error types for bitstream consumers.

Two outcomes leave a draw abruptly. ``Overrun`` is expected during shrinking
and is caught by whatever runs the attempt. ``InvariantViolation`` means the
generator code (or this package) is broken and should fail the test run.
"""


class Overrun(Exception):
    """A buffered bitstream ran out of words mid-draw."""

    def __init__(self, consumed: int):
        self.consumed = consumed
        super().__init__(f"overrun after {consumed} words")


class InvariantViolation(AssertionError):
    """An internal invariant of the recording was broken."""


def assert_invariant(condition: bool, message: str = "invariant violated", *args) -> None:
    """Raise InvariantViolation unless condition holds.

    Unlike a bare ``assert`` this survives ``python -O``.

    Args:
        condition: Value that must be truthy
        message: %-style message
        *args: Arguments for the message
    """
    if not condition:
        raise InvariantViolation(message % args if args else message)
