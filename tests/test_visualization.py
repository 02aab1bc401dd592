import matplotlib.pyplot as plt
import numpy as np

from lineintersection import Status, linesIntersection
from lineintersection.visualization import showLinesIntersection


def test_show_lines_intersection():
    M1, u1, M2, u2 = np.array([2, 3, -1]), np.array([3, 5, 7]), np.array([7, 5, 11]), np.array([-2, 3, -5])
    I, rc = linesIntersection(M1, u1, M2, u2, verbose=False)

    fig = showLinesIntersection(M1, u1, M2, u2, I, rc)
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    labels = ax.get_legend_handles_labels()[1]
    assert "Intersection" in labels
    plt.close(fig)


def test_show_2d_without_intersection():
    fig = showLinesIntersection([0, 0], [1, 2], [1, 0], [2, 4], np.array([]), Status.NONE)
    labels = fig.axes[0].get_legend_handles_labels()[1]
    assert "Intersection" not in labels
    assert "Line 1" in labels and "Line 2" in labels
    assert fig.axes[0].elev == 90
    plt.close(fig)


def test_3d_view_is_not_from_above():
    fig = showLinesIntersection([0, 0, 0], [1, 0, 0], [0, 0, 1], [0, 1, 0], np.array([]), Status.NONE)
    assert fig.axes[0].elev != 90
    plt.close(fig)
