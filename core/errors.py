"""Error types shared by the calculation tools."""


class InvalidInputError(ValueError):
    """Raised when an input lies outside a function's physical domain.

    Examples: zero or negative height, a birth date in the future, a Bristol
    form outside 1..7.
    """
