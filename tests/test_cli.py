import pytest

from hmmeval.cli import format_estimation, main
from hmmeval.estimation import PredictionEstimation

MODEL = """4
begin H L end
2
6
begin H 0.5
begin L 0.5
H H 0.8
H L 0.2
L L 0.8
L H 0.2
4
H a 0.9
H b 0.1
L a 0.1
L b 0.9
"""

DATA = """4
0 H a
1 H a
2 L b
3 L b
"""


@pytest.fixture
def files(tmp_path):
    model = tmp_path / "model.txt"
    data = tmp_path / "data.txt"
    model.write_text(MODEL)
    data.write_text(DATA)
    return str(model), str(data)


def test_format_estimation():
    line = format_estimation("H", PredictionEstimation(1, 2, 3, 4, 0.5))
    assert line == (
        "State H => True Positives=1, False Positives=2, "
        "True Negatives=3, False Negatives=4, f-measure=0.5"
    )


def test_main_reports_both_algorithms(files, capsys):
    assert main(list(files)) == 0
    out = capsys.readouterr().out
    assert "Viterbi algorithm state prediction estimations:" in out
    assert "Forward-backward algorithm state prediction estimations:" in out
    assert out.count("State ") == 4
    assert "State begin" not in out
    assert "State end" not in out


def test_main_usage(capsys):
    assert main([]) != 0
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_model(tmp_path, capsys):
    assert main([str(tmp_path / "none"), str(tmp_path / "none2")]) != 0
    assert "Failed to open model file" in capsys.readouterr().err


def test_main_missing_data(files, tmp_path, capsys):
    assert main([files[0], str(tmp_path / "none")]) != 0
    assert "Failed to open data file" in capsys.readouterr().err


def test_main_bad_model(tmp_path, files, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("1 only\n")
    assert main([str(bad), files[1]]) != 0
    err = capsys.readouterr().err
    assert "fatal problem while reading model" in err
    assert "at least two states" in err


def test_main_bad_data(tmp_path, files, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("0\n")
    assert main([files[0], str(bad)]) != 0
    err = capsys.readouterr().err
    assert "fatal problem while reading experiment data" in err
    assert "Empty experiment data" in err