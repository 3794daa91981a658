class InvalidInputError(ValueError):
    """
    Raised when the data given to ``SplineBuilder`` cannot be used to
    construct a natural cubic spline.
    """


class DomainError(ValueError):
    """
    Raised when the spline is queried outside the range of the data.
    """
