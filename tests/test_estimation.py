import math

import pytest

from hmmeval.estimation import (
    PredictionEstimation,
    confusion_matrix,
    most_probable_states,
    state_prediction_estimations,
)
from hmmeval.model import ExperimentData, Model, Observation


def _model(nstates=3):
    names = [f"s{i}" for i in range(nstates)]
    return Model(
        state_names=names,
        alphabet_size=1,
        transition_prob=[[0.0] * nstates for _ in range(nstates)],
        emission_prob=[[0.0] for _ in range(nstates)],
    )


def _data(states):
    return ExperimentData([Observation(t, s, 0) for t, s in enumerate(states)])


def test_most_probable_states_uses_product():
    fb = [
        [(0.9, 0.1), (0.5, 0.5), (0.1, 0.1)],
        [(0.0, 1.0), (0.1, 0.1), (0.2, 0.3)],
    ]
    assert most_probable_states(fb) == [1, 2]


def test_most_probable_states_tie_picks_first():
    fb = [[(0.5, 0.5), (0.25, 1.0), (0.0, 0.0)]]
    assert most_probable_states(fb) == [0]


def test_most_probable_states_empty():
    assert most_probable_states([]) == []


def test_confusion_matrix_counts():
    model = _model()
    data = _data([1, 1, 2, 2])
    matrix = confusion_matrix(data, [1, 2, 2, 2], model)
    assert matrix[1][1] == 1
    assert matrix[2][1] == 1
    assert matrix[2][2] == 2
    assert sum(map(sum, matrix)) == 4


def test_confusion_matrix_shape():
    model = _model(4)
    matrix = confusion_matrix(_data([1]), [1], model)
    assert len(matrix) == 4
    assert all(len(row) == 4 for row in matrix)


def test_confusion_matrix_too_many_predictions():
    with pytest.raises(ValueError):
        confusion_matrix(_data([1]), [1, 1], _model())


def test_perfect_prediction_has_full_f_measure():
    model = _model()
    states = [1, 2, 1, 2, 2]
    matrix = confusion_matrix(_data(states), states, model)
    est = state_prediction_estimations(matrix)
    assert est[1].f_measure == pytest.approx(1.0)
    assert est[2].f_measure == pytest.approx(1.0)
    assert est[1].false_positives == 0
    assert est[1].false_negatives == 0
    assert est[1].true_positives == states.count(1)
    assert est[1].true_negatives == states.count(2)


def test_unused_state_has_zero_f_measure():
    est = state_prediction_estimations([[0, 0], [0, 3]])
    assert est[0] == PredictionEstimation(0, 0, 3, 0, 0.0)


def test_totals_are_consistent():
    matrix = [[2, 1, 0], [3, 4, 1], [0, 2, 5]]
    total = sum(map(sum, matrix))
    for est in state_prediction_estimations(matrix):
        assert (
            est.true_positives
            + est.false_positives
            + est.true_negatives
            + est.false_negatives
            == total
        )


def test_never_correct_gives_nan():
    est = state_prediction_estimations([[0, 2], [2, 0]])
    assert math.isnan(est[0].f_measure)
    assert est[0].false_positives == 2
    assert est[0].false_negatives == 2


def test_f_measure_between_precision_and_recall():
    matrix = [[3, 1], [2, 4]]
    est = state_prediction_estimations(matrix)
    precision = 3 / 4
    recall = 3 / 5
    assert min(precision, recall) <= est[0].f_measure <= max(precision, recall)