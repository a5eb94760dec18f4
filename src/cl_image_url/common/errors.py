"""Errors raised by the image URL builders."""

from typing import override


class InvalidArgumentError(ValueError):
    """Raised when a builder receives an out-of-range or missing argument.

    Validation happens before the parameter store is touched, so a failed
    call never leaves a partial write behind.
    """

    def __init__(self, message: str = "Invalid argument."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message
