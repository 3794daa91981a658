from splinterp.errors import InvalidInputError, DomainError
from splinterp.polynomial import Polynomial, PiecewisePolynomial
from splinterp.spline import natural_cubic_spline_coefficients
from splinterp.builder import SplineBuilder

__all__ = [
    "SplineBuilder",
    "PiecewisePolynomial",
    "Polynomial",
    "natural_cubic_spline_coefficients",
    "InvalidInputError",
    "DomainError",
]
