from numpy import array, asarray, diff, ndarray, searchsorted, zeros


class Polynomial:
    """
    A polynomial in a single variable, stored as its coefficients in
    order of increasing degree, so that ``Polynomial([a, b, c, d])``
    represents :math:`a + bt + ct^2 + dt^3`.

    :param coefficients: \
        The polynomial coefficients as a sequence of floats, starting
        with the constant term.
    """
    def __init__(self, coefficients):
        self._coefficients = array(coefficients, dtype=float)
        assert self._coefficients.ndim == 1
        assert self._coefficients.size > 0
        self._coefficients.setflags(write=False)

    @property
    def coefficients(self) -> ndarray:
        return self._coefficients

    @property
    def degree(self) -> int:
        return self._coefficients.size - 1

    def __call__(self, t):
        # Horner's method, starting from the highest-degree coefficient
        result = self._coefficients[-1]
        for c in self._coefficients[-2::-1]:
            result = result * t + c
        return result

    def __repr__(self):
        return f"Polynomial({self._coefficients.tolist()})"


class PiecewisePolynomial:
    """
    A function defined piecewise by polynomials. Each polynomial is
    associated with the knot at the start of the interval it covers, and
    is evaluated in terms of the distance from that knot. The interval
    covered by a polynomial extends up to the next knot, and the final
    polynomial covers everything above the last knot.

    :param knots: \
        The knot positions as a 1D ``numpy.ndarray``, sorted in strictly
        increasing order.

    :param polynomials: \
        A sequence of ``Polynomial`` objects, one for each knot, where the
        ``i``'th polynomial covers the interval starting at the ``i``'th knot.
    """
    def __init__(self, knots: ndarray, polynomials):
        self._knots = array(knots, dtype=float)
        self._polynomials = tuple(polynomials)

        assert self._knots.ndim == 1
        assert self._knots.size == len(self._polynomials) > 0
        assert (diff(self._knots) > 0).all()
        self._knots.setflags(write=False)

        # table of coefficients used for vectorised evaluation, padded with
        # zeros so that polynomials of differing degree can share the table
        n_coeffs = max(p.degree for p in self._polynomials) + 1
        self._table = zeros([self._knots.size, n_coeffs])
        for i, p in enumerate(self._polynomials):
            self._table[i, : p.degree + 1] = p.coefficients
        self._table.setflags(write=False)

    @property
    def knots(self) -> ndarray:
        return self._knots

    def __len__(self):
        return self._knots.size

    def __iter__(self):
        return zip(self._knots.tolist(), self._polynomials)

    def floor_entry(self, x: float) -> tuple[float, Polynomial]:
        """
        Find the largest knot which is less than or equal to the given
        position, and the polynomial associated with it.

        :param x: \
            The position for which the governing knot is found.

        :return: \
            The knot and its polynomial as a tuple ``(knot, polynomial)``.
        """
        i = int(searchsorted(self._knots, x, side="right")) - 1
        if i < 0:
            raise KeyError(
                f"""\n
                [ PiecewisePolynomial error ]
                >> The position {x} is below the first knot ({self._knots[0]}),
                >> and so is not covered by any of the polynomials.
                """
            )
        return float(self._knots[i]), self._polynomials[i]

    def evaluate(self, x: float) -> float:
        """
        Evaluate the piecewise-polynomial at the given position.

        :param x: \
            The position at which the function is evaluated.

        :return: \
            The value of the function as a ``float``.
        """
        knot, polynomial = self.floor_entry(x)
        return float(polynomial(x - knot))

    def evaluate_array(self, x: ndarray) -> ndarray:
        """
        Evaluate the piecewise-polynomial at all the given positions.

        :param x: \
            The positions at which the function is evaluated as a ``numpy.ndarray``.

        :return: \
            The values of the function as a ``numpy.ndarray`` with the
            same shape as ``x``.
        """
        x = asarray(x, dtype=float)
        inds = searchsorted(self._knots, x, side="right") - 1
        if (inds < 0).any():
            raise KeyError(
                f"""\n
                [ PiecewisePolynomial error ]
                >> {(inds < 0).sum()} of the given positions are below the first
                >> knot ({self._knots[0]}), and so are not covered by any of
                >> the polynomials.
                """
            )
        t = x - self._knots[inds]
        coeffs = self._table[inds]
        result = coeffs[..., -1]
        for k in range(self._table.shape[1] - 2, -1, -1):
            result = result * t + coeffs[..., k]
        return asarray(result)
