"""Command line evaluation of Viterbi and forward-backward state predictions."""

from __future__ import annotations

import sys
from typing import Sequence

from .algorithms import forward_backward_probabilities, most_probable_state_sequence
from .estimation import (
    PredictionEstimation,
    confusion_matrix,
    most_probable_states,
    state_prediction_estimations,
)
from .model import Model, read_experiment_data, read_model

PROGRAM = "hmmeval"


def format_estimation(state_name: str, estimation: PredictionEstimation) -> str:
    """Render one state's estimation as a report line."""
    return (
        f"State {state_name} => "
        f"True Positives={estimation.true_positives}, "
        f"False Positives={estimation.false_positives}, "
        f"True Negatives={estimation.true_negatives}, "
        f"False Negatives={estimation.false_negatives}, "
        f"f-measure={estimation.f_measure:g}"
    )


def _report(title: str, model: Model, estimations: list[PredictionEstimation]) -> None:
    print(title)
    # The begin and end states are left out.
    for name, estimation in zip(model.state_names[1:-1], estimations[1:-1]):
        print(format_estimation(name, estimation))
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Read a model and experiment data and report prediction quality."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {PROGRAM} path_to_model path_to_data ", file=sys.stderr)
        return 1
    model_path, data_path = args

    try:
        with open(model_path, encoding="utf-8") as handle:
            model_text = handle.read()
    except OSError:
        print("ERROR: Failed to open model file properly.", file=sys.stderr)
        return 1
    try:
        with open(data_path, encoding="utf-8") as handle:
            data_text = handle.read()
    except OSError:
        print("ERROR: Failed to open data file properly.", file=sys.stderr)
        return 1

    try:
        model = read_model(model_text)
    except ValueError as error:
        print(
            f"ERROR: fatal problem while reading model. Details: '{error}'",
            file=sys.stderr,
        )
        return 1

    try:
        data = read_experiment_data(model, data_text)
    except ValueError as error:
        print(
            f"ERROR: fatal problem while reading experiment data. Details: '{error}'",
            file=sys.stderr,
        )
        return 1

    viterbi = most_probable_state_sequence(model, data)
    estimations = state_prediction_estimations(confusion_matrix(data, viterbi, model))
    _report("Viterbi algorithm state prediction estimations:", model, estimations)

    states = most_probable_states(forward_backward_probabilities(model, data))
    estimations = state_prediction_estimations(confusion_matrix(data, states, model))
    _report("Forward-backward algorithm state prediction estimations:", model, estimations)

    return 0


if __name__ == "__main__":
    sys.exit(main())