import numpy as np

import matplotlib.pyplot as plt
from collections import OrderedDict

from lineintersection import helper
from lineintersection.Objects import Line, Status


def showLinesIntersection(M1, u1, M2, u2, I, rc, start=-2.0, end=2.0, subdivs=2):
    line1 = Line(M1, u1)
    line2 = Line(M2, u2)

    fig = plt.figure(figsize=(10, 10))
    ax = fig.add_subplot(projection='3d')
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")

    drawLine(ax, line1, "Line 1", "b", start, end, subdivs)
    drawLine(ax, line2, "Line 2", "g", start, end, subdivs)

    if Status(rc) == Status.UNIQUE:
        drawPoint(ax, I, "Intersection")
    elif Status(rc) == Status.INFINITE:
        drawPoint(ax, I, "Common point")

    # 2D lines are seen from above the XY plane
    if line1.dimension() == 2:
        ax.view_init(elev=90, azim=-90)

    handles, labels = ax.get_legend_handles_labels()
    by_label = OrderedDict(zip(labels, handles))
    ax.legend(by_label.values(), by_label.keys(), loc="upper right")
    return fig


def drawLine(ax, line, label, color, start, end, subdivs):
    origin = helper.embed3D(line.origin())
    direction = helper.embed3D(line.direction())

    ts = np.linspace(start, end, subdivs)
    points = origin + np.expand_dims(ts, -1) * direction
    ax.plot(points[:, 0], points[:, 1], points[:, 2], color=color, label=label)
    ax.scatter(origin[0], origin[1], origin[2], color=color, marker="x")


def drawPoint(ax, point, label):
    point = helper.embed3D(point)
    ax.scatter(point[0], point[1], point[2], color="r", s=40, label=label)
