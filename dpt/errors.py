"""Errors raised by the DPT codec.

All errors derive from ValueError so callers that already guard codec calls
with ``except ValueError`` (unknown DPT ids, bad input) keep working.
"""


class DPTError(ValueError):
    """Base class for codec errors."""


class LengthError(DPTError):
    """Payload width does not match the datapoint's fixed wire width."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} byte(s), got {actual}")


class RangeError(DPTError):
    """Decoded value lies outside the datapoint's semantic range."""

    def __init__(self, value: float, minimum: float, maximum: float):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f'value "{value:.2f}" outside range [{minimum:g}, {maximum:g}]'
        )


class UnknownDPTError(DPTError):
    """No datapoint type registered under this id (nor its main type)."""

    def __init__(self, dpt_id: str):
        self.dpt_id = dpt_id
        super().__init__(f"Unknown DPT: {dpt_id}")
