"""Hidden Markov model description and experiment data, with their text readers."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, TextIO, Union

Source = Union[str, TextIO]


class FormatError(ValueError):
    """Raised when a model or experiment data description is malformed."""


@dataclass
class Model:
    """A hidden Markov model.

    The first state is the begin state and the last one is the end state.
    ``transition_prob[i][j]`` is the probability of moving from state ``i`` to
    ``j``; ``emission_prob[i][k]`` is the probability that state ``i`` emits
    symbol ``k`` (symbols are ``a``, ``b``, ... in order).
    """

    state_names: list[str]
    alphabet_size: int
    transition_prob: list[list[float]]
    emission_prob: list[list[float]]
    state_index: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # A repeated name refers to its last position.
        self.state_index = {name: index for index, name in enumerate(self.state_names)}

    def state_count(self) -> int:
        """Number of states, the begin and end states included."""
        return len(self.transition_prob)


class Observation(NamedTuple):
    """One step of experiment data: its time, real hidden state and emitted symbol."""

    time: int
    state: int
    symbol: int


@dataclass
class ExperimentData:
    """A sequence of observations made on some model."""

    observations: list[Observation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)


class _Tokens:
    """Whitespace-separated tokens of a text source."""

    def __init__(self, source: Source) -> None:
        text = source if isinstance(source, str) else source.read()
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise FormatError("unexpected end of input") from None

    def count(self) -> int:
        token = self.word()
        try:
            value = int(token)
        except ValueError:
            raise FormatError(f"expected a non-negative integer, got {token!r}") from None
        if value < 0:
            raise FormatError(f"expected a non-negative integer, got {token!r}")
        return value

    def number(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise FormatError(f"expected a number, got {token!r}") from None


def _symbol_index(symbol: str, alphabet_size: int) -> int:
    index = ord(symbol[0]) - ord("a")
    if not 0 <= index < alphabet_size:
        raise FormatError(f"symbol {symbol!r} is outside the alphabet of size {alphabet_size}")
    return index


def _state_of(model_index: dict[str, int], name: str) -> int:
    try:
        return model_index[name]
    except KeyError:
        raise FormatError(f"unknown state {name!r}") from None


def read_model(source: Source) -> Model:
    """Read a model description from a string or a text stream."""
    tokens = _tokens_of(source)

    nstates = tokens.count()
    if nstates < 2:
        raise FormatError("There must be at least two states: begin and end")
    names = [tokens.word() for _ in range(nstates)]
    index = {name: i for i, name in enumerate(names)}

    alphabet_size = tokens.count()

    transitions = [[0.0] * nstates for _ in range(nstates)]
    for _ in range(tokens.count()):
        from_name, to_name, prob = tokens.word(), tokens.word(), tokens.number()
        from_ind = _state_of(index, from_name)
        to_ind = _state_of(index, to_name)
        if from_ind + 1 == nstates:
            raise FormatError("Transition from the ending state is forbidden")
        if to_ind == 0:
            raise FormatError("Transition to the starting state is forbidden")
        transitions[from_ind][to_ind] = prob

    emissions = [[0.0] * alphabet_size for _ in range(nstates)]
    for _ in range(tokens.count()):
        state_name, symbol, prob = tokens.word(), tokens.word(), tokens.number()
        state_ind = _state_of(index, state_name)
        symbol_ind = _symbol_index(symbol, alphabet_size)
        if state_ind == 0 or state_ind + 1 == nstates:
            raise FormatError(
                "Symbol emission from the beginning or the ending states is forbidden"
            )
        emissions[state_ind][symbol_ind] = prob

    return Model(
        state_names=names,
        alphabet_size=alphabet_size,
        transition_prob=transitions,
        emission_prob=emissions,
    )


def read_experiment_data(model: Model, source: Source) -> ExperimentData:
    """Read experiment data for ``model`` from a string or a text stream."""
    tokens = _tokens_of(source)

    nsteps = tokens.count()
    if nsteps == 0:
        raise FormatError("Empty experiment data")

    observations = []
    for _ in range(nsteps):
        time, state_name, symbol = tokens.count(), tokens.word(), tokens.word()
        observations.append(
            Observation(
                time=time,
                state=_state_of(model.state_index, state_name),
                symbol=_symbol_index(symbol, model.alphabet_size),
            )
        )
    return ExperimentData(observations)


def _tokens_of(source: Source) -> _Tokens:
    if isinstance(source, (str, io.TextIOBase)) or hasattr(source, "read"):
        return _Tokens(source)
    raise TypeError("source must be a string or a text stream")