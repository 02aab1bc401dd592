from lineintersection.helper import PRECISION
from lineintersection.Objects import Line, Status, Reason, IntersectionResult
from lineintersection.Intersections import linesIntersection, solveLines, describe
