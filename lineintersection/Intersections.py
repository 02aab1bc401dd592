import numpy as np

from lineintersection import helper
from lineintersection.Objects import Line, Status, Reason, IntersectionResult

MESSAGES = {
    Status.NONE: "Lines 1 and 2 have no intersection.",
    Status.UNIQUE: "Lines 1 and 2 intersect in one single unique point.",
    Status.INFINITE: "L1 = L2 : lines 1 and 2 are actually a same one.",
}


def describe(status):
    return MESSAGES[Status(status)]


# Intersection of two lines given in parametric form, M + t*u.
# Both lines are embedded in 3D, the parallel case is decided on the cross product
# of the unit directors, otherwise t and u are solved with Cramer's rule on the two
# coordinates complementary to the pivot and checked against each other.
# Distances are compared to precision times the magnitude of the coordinates.
def solveLines(line1, line2, precision=helper.PRECISION):
    M1, u1, M2, u2 = helper.validateLines(line1.origin(), line1.direction(), line2.origin(), line2.direction())

    m1, d1, m2, d2 = [helper.embed3D(vec) for vec in (M1, u1, M2, u2)]
    diff = m2 - m1
    n1 = helper.unit(d1)
    n2 = helper.unit(d2)

    if helper.isZero(np.cross(n1, n2), precision):
        tolerance = precision * helper.magnitude(m1, m2)
        if helper.isZero(np.cross(n1, diff), tolerance) and helper.isZero(np.cross(n2, diff), tolerance):
            return IntersectionResult(M1, Status.INFINITE, Reason.COINCIDENT)

        return IntersectionResult(np.array([]), Status.NONE, Reason.PARALLEL)

    scale = np.linalg.norm(d1) * np.linalg.norm(d2)
    d = helper.signedCross(np.cross(d1, d2))
    f = helper.findPivot(d, precision * scale)
    if f is None:
        # sin of the angle is above precision while no single component is
        f = int(np.argmax(np.abs(d)))

    k = helper.complementaryCoordinates(f)
    dt = helper.det2(diff[k], -d2[k])
    du = helper.det2(d1[k], diff[k])

    t = dt / d[f]
    u = du / d[f]

    I1 = m1 + d1 * t
    I2 = m2 + d2 * u

    # rounding in t and u grows as the lines get close to parallel
    tolerance = precision * helper.magnitude(m1, m2, I1, I2) * scale / abs(d[f])
    if np.all(np.abs(I1 - I2) < tolerance):
        return IntersectionResult(helper.truncate(I1, M1), Status.UNIQUE, Reason.SECANT, t=t, u=u)

    return IntersectionResult(np.array([]), Status.NONE, Reason.SKEW)


def linesIntersection(M1, u1, M2, u2, verbose=True, precision=helper.PRECISION):
    """Intersection point I of the lines L1(M1, u1) and L2(M2, u2) with its return code rc.

    rc is Status.NONE (no intersection, I is empty), Status.UNIQUE (I is the
    intersection point) or Status.INFINITE (L1 = L2, I is M1). When verbose is
    set the matching message is printed.
    """
    result = solveLines(Line(M1, u1), Line(M2, u2), precision=precision)

    if verbose:
        print(describe(result.status()))

    return result.point(), result.status()
