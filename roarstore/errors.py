"""Errors shared across the package."""


class NonSortedIntegers(ValueError):
    """Raised when a sequence of integers expected to be sorted is not."""

    def __init__(self, valid_until):
        super().__init__(valid_until)
        self.valid_until = valid_until

    def __str__(self):
        return f"integers are ordered up to the {self.valid_until}th element"