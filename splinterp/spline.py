from numpy import ndarray, zeros


def natural_cubic_spline_coefficients(
    x: ndarray, y: ndarray
) -> tuple[ndarray, ndarray, ndarray]:
    r"""
    Computes the coefficients of a natural cubic spline in 'local' form, where
    the polynomial for the interval :math:`[x_i, x_{i+1}]` is

    .. math::

       S_i(x) = y_i + b_i t + c_i t^2 + d_i t^3, \quad t = x - x_i

    The :math:`c_i` are found by solving the tridiagonal system for the
    interior knots with a Crout factorization, and the natural boundary
    conditions :math:`c_0 = c_n = 0` are left in place from initialisation.

    :param x: \
        The knot positions as a 1D ``numpy.ndarray``, sorted in strictly
        increasing order.

    :param y: \
        The values at the knots as a 1D ``numpy.ndarray``.

    :return: \
        The linear, quadratic and cubic coefficients ``b``, ``c`` and ``d`` as
        1D ``numpy.ndarray``. ``b`` and ``d`` have one element per interval,
        while ``c`` has one element per knot.
    """
    assert x.size == y.size
    assert x.ndim == y.ndim == 1
    assert x.size > 2
    n = x.size - 1

    b = zeros(n)
    c = zeros(n + 1)
    d = zeros(n)

    h = x[1:] - x[:-1]
    dy = y[1:] - y[:-1]

    # build linear system target values
    g = zeros(n)
    g[1:] = 3 * dy[1:] / h[1:] - 3 * dy[:-1] / h[:-1]

    # forward sweep of the Crout factorization
    m = zeros(n)
    z = zeros(n)
    for i in range(1, n):
        l = 2 * (x[i + 1] - x[i - 1]) - h[i - 1] * m[i - 1]
        m[i] = h[i] / l
        z[i] = (g[i] - h[i - 1] * z[i - 1]) / l

    # back-substitution, which also gives the remaining coefficients
    for j in range(n - 1, -1, -1):
        c[j] = z[j] - m[j] * c[j + 1]
        b[j] = dy[j] / h[j] - h[j] * (c[j + 1] + 2.0 * c[j]) / 3.0
        d[j] = (c[j + 1] - c[j]) / (3.0 * h[j])

    return b, c, d
