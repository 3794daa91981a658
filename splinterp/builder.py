from threading import Lock
from warnings import warn
from numpy import array, asarray, diff, isfinite, isnan, ndarray

from splinterp.errors import InvalidInputError, DomainError
from splinterp.polynomial import Polynomial, PiecewisePolynomial
from splinterp.spline import natural_cubic_spline_coefficients


class SplineBuilder:
    """
    Interpolates between a set of data points using a natural cubic spline,
    that is a piecewise-cubic function which passes through every data point,
    has continuous first and second derivatives, and has a second derivative
    of zero at the first and last data points.

    The spline coefficients are computed the first time the spline is
    evaluated, and are re-used for all later evaluations.

    :param xs: \
        The x-values of the data points as a 1D sequence of floats, sorted in
        strictly increasing order. At least 3 points are required.

    :param ys: \
        The y-values of the data points as a 1D sequence of floats with the
        same length as ``xs``.
    """
    def __init__(self, xs, ys):
        try:
            self.xs = array(xs, dtype=float)
            self.ys = array(ys, dtype=float)
        except (TypeError, ValueError) as err:
            raise InvalidInputError(
                f"""\n
                [ SplineBuilder error ]
                >> The 'xs' and 'ys' arguments could not be converted to
                >> arrays of floats:
                >> {err}
                """
            ) from err

        if self.xs.ndim != 1 or self.ys.ndim != 1:
            raise InvalidInputError(
                f"""\n
                [ SplineBuilder error ]
                >> The 'xs' and 'ys' arguments must be one-dimensional, but
                >> have {self.xs.ndim} and {self.ys.ndim} dimensions respectively.
                """
            )

        if self.xs.size != self.ys.size:
            raise InvalidInputError(
                f"""\n
                [ SplineBuilder error ]
                >> The 'xs' and 'ys' arguments must have the same length, but
                >> have lengths {self.xs.size} and {self.ys.size} respectively.
                """
            )

        if self.xs.size < 3:
            raise InvalidInputError(
                f"""\n
                [ SplineBuilder error ]
                >> At least 3 data points are required for interpolation, but
                >> only {self.xs.size} were given.
                """
            )

        if not (isfinite(self.xs).all() and (diff(self.xs) > 0).all()):
            raise InvalidInputError(
                f"""\n
                [ SplineBuilder error ]
                >> The values given in the 'xs' argument must be finite and
                >> sorted in strictly increasing order.
                """
            )

        if not isfinite(self.ys).all():
            warn(
                f"""\n
                [ SplineBuilder warning ]
                >> {(~isfinite(self.ys)).sum()} of the values given in the 'ys'
                >> argument are not finite. Non-finite values propagate through
                >> the spline coefficients, so the interpolated values will
                >> not be finite either.
                """
            )

        self.xs.setflags(write=False)
        self.ys.setflags(write=False)

        self._spline_function = None
        self._lock = Lock()

    @property
    def spline_function(self) -> PiecewisePolynomial:
        """
        The ``PiecewisePolynomial`` which represents the spline. It is computed
        on first access, and the same object is returned thereafter.
        """
        if self._spline_function is None:
            with self._lock:
                if self._spline_function is None:
                    self._spline_function = self._compute_spline_function()
        return self._spline_function

    def _compute_spline_function(self) -> PiecewisePolynomial:
        b, c, d = natural_cubic_spline_coefficients(self.xs, self.ys)
        n = self.xs.size - 1
        polynomials = [
            Polynomial([self.ys[i], b[i], c[i], d[i]]) for i in range(n)
        ]
        return PiecewisePolynomial(knots=self.xs[:-1], polynomials=polynomials)

    def interpolate(self, x: float) -> float:
        """
        Evaluate the spline at the given position.

        :param x: \
            The position at which the spline is evaluated. Must lie within
            the range of the ``xs`` values.

        :return: \
            The interpolated value as a ``float``.
        """
        if not (self.xs[0] <= x <= self.xs[-1]):
            raise DomainError(
                f"""\n
                [ SplineBuilder error ]
                >> Cannot interpolate at x = {x}, as interpolation is only
                >> possible between {self.xs[0]} and {self.xs[-1]}.
                """
            )
        return self.spline_function.evaluate(x)

    def __call__(self, x: ndarray) -> ndarray:
        """
        Evaluate the spline at all the given positions.

        :param x: \
            The positions at which the spline is evaluated as a ``numpy.ndarray``.
            All values must lie within the range of the ``xs`` values.

        :return: \
            The interpolated values as a ``numpy.ndarray`` with the same
            shape as ``x``.
        """
        x = asarray(x, dtype=float)
        outside = (x < self.xs[0]) | (x > self.xs[-1]) | isnan(x)
        if outside.any():
            raise DomainError(
                f"""\n
                [ SplineBuilder error ]
                >> {outside.sum()} of the given positions are outside the range
                >> in which interpolation is possible, which is between
                >> {self.xs[0]} and {self.xs[-1]}.
                """
            )
        return self.spline_function.evaluate_array(x)

    def get_configuration(self) -> dict:
        return {"xs": self.xs, "ys": self.ys}

    @classmethod
    def from_configuration(cls, config: dict):
        return cls(xs=config["xs"], ys=config["ys"])

    def copy(self):
        """
        Build and return a separate copy of the spline builder with
        the same data. The spline coefficients of the copy are computed
        independently on its first evaluation.
        """
        return self.from_configuration(self.get_configuration())
