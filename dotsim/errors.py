#!/usr/bin/env python3
"""
Exceptions raised by the simulation core.
"""


class DegenerateInputError(ValueError):
    """A non-finite or non-numeric position or velocity was offered to the simulation."""

    def __init__(self, what: str, value):
        super().__init__(f"unusable {what}: {value!r}")
        self.what = what
        self.value = value
