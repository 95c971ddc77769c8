"""Viterbi and forward-backward algorithms over a hidden Markov model."""

from __future__ import annotations

from .model import ExperimentData, Model


def most_probable_state_sequence(model: Model, data: ExperimentData) -> list[int]:
    """Predict hidden state indices for the observations with the Viterbi algorithm."""
    nstates = model.state_count()
    symbols = [obs.symbol for obs in data]
    trans = model.transition_prob
    emit = model.emission_prob

    probability: list[list[float]] = []
    back: list[list[int]] = []

    for t, symbol in enumerate(symbols):
        row: list[float] = []
        back_row: list[int] = []
        for cur in range(nstates):
            if t == 0:
                best_prev = 0
                best_prob = trans[0][cur] * emit[cur][symbol]
            else:
                previous = probability[t - 1]
                best_prev, best_prob = 0, -1.0
                for prev in range(nstates):
                    candidate = previous[prev] * trans[prev][cur] * emit[cur][symbol]
                    if candidate > best_prob:
                        best_prev, best_prob = prev, candidate
            row.append(best_prob)
            back_row.append(best_prev)
        probability.append(row)
        back.append(back_row)

    last = probability[-1]
    current = max(range(nstates), key=last.__getitem__)

    sequence = []
    for step in range(len(symbols) - 1, 0, -1):
        current = back[step][current]
        sequence.append(current)
    sequence.append(current)
    sequence.reverse()
    return sequence


def forward_backward_probabilities(
    model: Model, data: ExperimentData
) -> list[list[tuple[float, float]]]:
    """Return ``result[t][i] == (alpha, beta)`` for every step and state.

    ``alpha`` is the probability of the first observations up to ``t`` ending
    in state ``i``; ``beta`` is the probability of the observations after ``t``
    given state ``i`` at ``t``.
    """
    nstates = model.state_count()
    symbols = [obs.symbol for obs in data]
    trans = model.transition_prob
    emit = model.emission_prob

    forward: list[list[float]] = []
    for t, symbol in enumerate(symbols):
        if t == 0:
            row = [trans[0][cur] * emit[cur][symbol] for cur in range(nstates)]
        else:
            previous = forward[t - 1]
            row = [
                sum(previous[prev] * trans[prev][cur] for prev in range(nstates))
                * emit[cur][symbol]
                for cur in range(nstates)
            ]
        forward.append(row)

    backward: list[list[float]] = [[1.0] * nstates]
    for next_symbol in reversed(symbols[1:]):
        following = backward[0]
        row = [
            sum(
                trans[cur][nxt] * emit[nxt][next_symbol] * following[nxt]
                for nxt in range(nstates)
            )
            for cur in range(nstates)
        ]
        backward.insert(0, row)

    return [list(zip(alpha_row, beta_row)) for alpha_row, beta_row in zip(forward, backward)]