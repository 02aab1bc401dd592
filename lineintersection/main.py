import argparse

import numpy as np
import matplotlib.pyplot as plt

from lineintersection import helper, visualization
from lineintersection.Intersections import linesIntersection
from lineintersection.Objects import Status

EXAMPLES = [
    ("3D single point intersection", [2, 3, -1], [3, 5, 7], [7, 5, 11], [-2, 3, -5], [5, 8, 6], Status.UNIQUE),
    ("3D single point intersection, column vectors", [[6], [6], [6]], [[1], [1], [1]], [[1], [0], [2]], [[0], [1], [-1]], [[1], [1], [1]], Status.UNIQUE),
    ("2D single point intersection", [0, -1, 0], [2, 1, 0], [0, 4, 0], [1, -2, 0], [2, 0, 0], Status.UNIQUE),
    ("3D void intersection", [2, 3, 5], [7, 11, 13], [3, 5, 2], [11, 13, 7], [], Status.NONE),
    ("3D, L1 = L2", [-2, 2, -2], [1, -1, 1], [3, -3, 3], [-1, 1, -1], [-2, 2, -2], Status.INFINITE),
]


def formatPoint(I):
    return np.array2string(np.asarray(I).ravel(), separator=", ")


def matchesExpected(I, rc, expectedI, expectedRc):
    I = np.asarray(I, dtype=np.float64).ravel()
    expectedI = np.asarray(expectedI, dtype=np.float64).ravel()
    return rc == expectedRc and I.shape == expectedI.shape and np.allclose(I, expectedI)


# Returns the number of examples whose result differs from the documented one
def runExamples(verbose):
    mismatches = 0
    for k, (title, M1, u1, M2, u2, expectedI, expectedRc) in enumerate(EXAMPLES):
        print("Example #{0} : {1}".format(k + 1, title))
        I, rc = linesIntersection(np.array(M1), np.array(u1), np.array(M2), np.array(u2), verbose=verbose)
        print("I = {0}, rc = {1} (expected : I = {2}, rc = {3})".format(formatPoint(I), int(rc), formatPoint(expectedI), int(expectedRc)))

        if not matchesExpected(I, rc, expectedI, expectedRc):
            print("Example #{0} does not match the expected result.".format(k + 1))
            mismatches += 1

    return mismatches


def buildParser():
    parser = argparse.ArgumentParser(description="Intersection of two lines L1(M1, u1) and L2(M2, u2) of the 2D or 3D space")
    parser.add_argument('--m1', type=float, nargs='+', help="A point belonging to line 1")
    parser.add_argument('--u1', type=float, nargs='+', help="A director of line 1")
    parser.add_argument('--m2', type=float, nargs='+', help="A point belonging to line 2")
    parser.add_argument('--u2', type=float, nargs='+', help="A director of line 2")
    parser.add_argument('--precision', type=float, default=helper.PRECISION, help="Threshold under which a quantity is considered zero.")
    parser.add_argument('--verbose', '-v', default=False, action='store_true', help="Print the kind of intersection found.")
    parser.add_argument('--plot', '-p', default=False, action='store_true', help="Plot both lines and their intersection.")
    parser.add_argument('--examples', '-e', default=False, action='store_true', help="Run the documented examples.")
    return parser


def main(argv=None):
    parser = buildParser()
    args = parser.parse_args(argv)

    if args.examples:
        if runExamples(args.verbose):
            return 1
        return 0

    vectors = [args.m1, args.u1, args.m2, args.u2]
    if any(vec is None for vec in vectors):
        parser.error("--m1, --u1, --m2 and --u2 are required unless --examples is given")

    try:
        I, rc = linesIntersection(*[np.array(vec) for vec in vectors], verbose=args.verbose, precision=args.precision)
    except ValueError as e:
        parser.error(str(e))

    print("I = {0}".format(formatPoint(I)))
    print("rc = {0}".format(int(rc)))

    if args.plot:
        visualization.showLinesIntersection(*[np.array(vec) for vec in vectors], I, rc)
        plt.show()

    return 0
