"""Quality estimations of hidden state predictions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .model import ExperimentData, Model


@dataclass(frozen=True)
class PredictionEstimation:
    """Prediction quality for one state."""

    true_positives: int
    false_positives: int
    true_negatives: int
    false_negatives: int
    f_measure: float


def most_probable_states(
    forward_backward: Sequence[Sequence[tuple[float, float]]],
) -> list[int]:
    """Pick at each step the state with the largest ``alpha * beta`` product.

    Ties go to the state with the lowest index.
    """
    return [
        max(range(len(step)), key=lambda state: step[state][0] * step[state][1])
        for step in forward_backward
    ]


def confusion_matrix(
    real_data: ExperimentData, predicted_states: Sequence[int], model: Model
) -> list[list[int]]:
    """Count predictions: ``matrix[i][j]`` is how often state ``i`` was predicted when ``j`` was real."""
    nstates = model.state_count()
    matrix = [[0] * nstates for _ in range(nstates)]
    if len(predicted_states) > len(real_data):
        raise ValueError("more predicted states than observations")
    for predicted, observation in zip(predicted_states, real_data):
        matrix[predicted][observation.state] += 1
    return matrix


def state_prediction_estimations(
    matrix: Sequence[Sequence[int]],
) -> list[PredictionEstimation]:
    """Compute true/false positives and negatives and the f-measure for every state."""
    row_sums = [sum(row) for row in matrix]
    col_sums = [sum(column) for column in zip(*matrix)] if matrix else []
    total = sum(row_sums)

    estimations = []
    for state, (row_sum, col_sum) in enumerate(zip(row_sums, col_sums)):
        hits = matrix[state][state]
        precision = hits / row_sum if row_sum else 0.0
        recall = hits / col_sum if col_sum else 0.0

        if row_sum == 0 and col_sum == 0:
            f_measure = 0.0
        elif precision + recall == 0:
            f_measure = float("nan")
        else:
            f_measure = 2.0 * precision * recall / (precision + recall)

        estimations.append(
            PredictionEstimation(
                true_positives=hits,
                false_positives=row_sum - hits,
                true_negatives=total - row_sum - col_sum + hits,
                false_negatives=col_sum - hits,
                f_measure=f_measure,
            )
        )
    return estimations