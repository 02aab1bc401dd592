import numpy as np

# Zero threshold used by every comparison of the solver
PRECISION = 1e3 * np.finfo(float).eps

X = 0
Y = 1
Z = 2


# Pads a 2D vector with a zero third coordinate, 3D vectors are returned flat
def embed3D(vec):
    vec = np.asarray(vec, dtype=np.float64).ravel()

    if vec.size == 2:
        return np.append(vec, 0.0)

    return vec


# Inverse of embed3D, gives back the point with the element count and layout of like
def truncate(point, like):
    like = np.asarray(like)
    return point[:like.size].reshape(like.shape)


def det2(a, b):
    return a[0] * b[1] - a[1] * b[0]


def signedCross(v):
    return np.array([-v[X], v[Y], -v[Z]])


# Component of d with the largest magnitude, the best conditioned 2x2 system.
# Returns None when no component exceeds the precision.
def findPivot(d, precision=PRECISION):
    f = int(np.argmax(np.abs(d)))

    if np.abs(d[f]) <= precision:
        return None

    return f


def complementaryCoordinates(f):
    return [i for i in range(3) if i != f]


def isZero(vec, precision=PRECISION):
    return np.linalg.norm(vec) < precision


def unit(vec):
    return vec / np.linalg.norm(vec)


# Largest norm among the given points, never below 1 so that small coordinates
# keep the absolute precision
def magnitude(*points):
    return max([1.0] + [float(np.linalg.norm(point)) for point in points])


def validateVector(vec, name):
    array = np.asarray(vec)

    if array.dtype == object or not (np.issubdtype(array.dtype, np.number) or array.dtype == bool):
        raise ValueError("{0} must contain real numbers only.".format(name))

    if np.iscomplexobj(array):
        raise ValueError("{0} must contain real numbers only.".format(name))

    if array.ndim > 2 or (array.ndim == 2 and 1 not in array.shape):
        raise ValueError("{0} must be a row or column vector.".format(name))

    if not np.isfinite(array).all():
        raise ValueError("{0} must contain finite values only.".format(name))

    return array.astype(np.float64)


def validateLines(M1, u1, M2, u2):
    """Checks the (point, director) pairs of both lines and returns them as float arrays.

    Raises ValueError when the inputs are not four real vectors of the same
    shape with 2 or 3 elements, or when a director is the zero vector.
    """
    names = ["M1", "u1", "M2", "u2"]
    arrays = [validateVector(vec, name) for vec, name in zip([M1, u1, M2, u2], names)]

    shapes = set(array.shape for array in arrays)
    if len(shapes) != 1:
        raise ValueError("All inputs vectors and points must have the same size.")

    n = arrays[0].size
    if n < 2 or n > 3:
        raise ValueError("Input vectors and points must have 2 or 3 elements.")

    for array, name in zip(arrays[1::2], names[1::2]):
        if not np.any(array):
            raise ValueError("Director {0} must not be the zero vector.".format(name))

    return arrays
