import pytest

from lineintersection import Status
from lineintersection import main as cli
from lineintersection.main import main


def test_single_point(capsys):
    assert main(["--m1", "2", "3", "-1", "--u1", "3", "5", "7", "--m2", "7", "5", "11", "--u2", "-2", "3", "-5"]) == 0
    out = capsys.readouterr().out
    assert "I = [5., 8., 6.]" in out
    assert "rc = 1" in out


def test_verbose_void_intersection(capsys):
    main(["-v", "--m1", "2", "3", "5", "--u1", "7", "11", "13", "--m2", "3", "5", "2", "--u2", "11", "13", "7"])
    out = capsys.readouterr().out
    assert "Lines 1 and 2 have no intersection." in out
    assert "rc = 0" in out


def test_examples(capsys):
    assert main(["--examples"]) == 0
    out = capsys.readouterr().out
    assert "Example #5" in out
    assert "rc = 2 (expected : I = " in out


def test_missing_line():
    with pytest.raises(SystemExit) as e:
        main(["--m1", "0", "0"])
    assert e.value.code == 2


def test_invalid_line():
    with pytest.raises(SystemExit) as e:
        main(["--m1", "0", "0", "--u1", "0", "0", "--m2", "1", "1", "--u2", "1", "0"])
    assert e.value.code == 2


def test_examples_report_mismatch(monkeypatch, capsys):
    monkeypatch.setattr(cli, "EXAMPLES", [("wrong expectation", [2, 3, -1], [3, 5, 7], [7, 5, 11], [-2, 3, -5], [5, 8, 7], Status.UNIQUE)])
    assert main(["-e"]) == 1
    assert "Example #1 does not match the expected result." in capsys.readouterr().out
