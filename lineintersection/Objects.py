from enum import Enum, IntEnum

import numpy as np


class Status(IntEnum):
    NONE = 0
    UNIQUE = 1
    INFINITE = 2


class Reason(Enum):
    SECANT = "secant"
    SKEW = "skew"
    PARALLEL = "parallel"
    COINCIDENT = "coincident"


class Line:
    def __init__(self, origin, direction):
        self._origin = origin
        self._direction = direction

    def origin(self):
        return self._origin

    def direction(self):
        return self._direction

    def dimension(self):
        return np.asarray(self._origin).size

    def pointAt(self, t):
        return np.asarray(self._origin) + t * np.asarray(self._direction)

    def __repr__(self):
        return "Line(origin={0}, direction={1})".format(self._origin, self._direction)


class IntersectionResult:
    def __init__(self, point, status, reason, t=None, u=None):
        self._point = point
        self._status = status
        self._reason = reason
        self._t = t
        self._u = u

    def point(self):
        return self._point

    def status(self):
        return self._status

    def reason(self):
        return self._reason

    def t(self):
        return self._t

    def u(self):
        return self._u

    # Unpacks as (I, rc)
    def __iter__(self):
        return iter((self._point, self._status))

    def __repr__(self):
        return "IntersectionResult(point={0}, status={1}, reason={2})".format(self._point, self._status.name, self._reason.value)
