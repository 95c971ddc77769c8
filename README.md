# hmmeval

Predict the hidden states of a hidden Markov model from observed symbols, and
measure how good those predictions are.

There are two predictors:

- **Viterbi** (`most_probable_state_sequence`) finds the single most probable
  sequence of hidden states.
- **Forward-backward** (`forward_backward_probabilities` followed by
  `most_probable_states`) finds the most probable hidden state at each step,
  taking each step separately.

Each prediction is compared with the true states recorded in the experiment
data. For every state the comparison gives true and false positives, true and
false negatives, and the f-measure.

## Installation

```
pip install .
```

You need Python 3.10 or later. There are no runtime dependencies.

## Command line

```
hmmeval path_to_model path_to_data
```

The command prints two blocks of per-state estimations. The first block is for
the Viterbi predictions and the second is for the forward-backward predictions.
The begin state and the end state are not listed. Each line has this form:

```
State NAME => True Positives=.., False Positives=.., True Negatives=.., False Negatives=.., f-measure=..
```

The command exits with status 0 on success. It exits with status 1 in these
cases, and prints a message on standard error:

- it was not given exactly two arguments (a usage line is printed);
- a file could not be opened;
- the model or the data could not be read.

## Input formats

Both files are read as whitespace-separated tokens. Counts must be
non-negative integers and probabilities must be numbers.

**Model file**

1. The number of states, which must be at least 2, followed by that many state
   names. The first state is the begin state and the last is the end state.
2. The alphabet size. Symbols are the lowercase letters starting from `a`, and
   only the first character of a symbol token counts.
3. The number of transitions, followed by that many `from to probability`
   triples. A transition may not leave the end state or enter the begin state.
   Transitions that are not listed have probability 0.
4. The number of emissions, followed by that many `state symbol probability`
   triples. The begin state and the end state may not emit symbols. Emissions
   that are not listed have probability 0.

**Data file**

The number of steps, which must be at least 1, followed by that many
`step state symbol` triples. Each state name must be one that the model
defines, and each symbol must be within the model's alphabet.

If the input is malformed, reading raises `hmmeval.model.FormatError`. This
covers unknown state names, symbols outside the alphabet, forbidden
transitions or emissions, bad numbers and input that ends too early.
`FormatError` is a subclass of `ValueError`.

## Library use

```python
from hmmeval.model import read_model, read_experiment_data
from hmmeval.algorithms import most_probable_state_sequence, forward_backward_probabilities
from hmmeval.estimation import (
    most_probable_states,
    confusion_matrix,
    state_prediction_estimations,
)
from hmmeval.cli import format_estimation

with open("model.txt") as f:
    model = read_model(f)
with open("data.txt") as f:
    data = read_experiment_data(model, f)

viterbi = most_probable_state_sequence(model, data)
estimations = state_prediction_estimations(confusion_matrix(data, viterbi, model))
for name, estimation in zip(model.state_names, estimations):
    print(format_estimation(name, estimation))

fb = forward_backward_probabilities(model, data)
states = most_probable_states(fb)
```

`read_model` and `read_experiment_data` accept either a string or a text
stream.

### Model

- `Model` has the fields `state_names`, `alphabet_size`, `transition_prob`
  (`[from][to]`) and `emission_prob` (`[state][symbol]`).
- `Model.state_index` maps each state name to its index.
- `Model.state_count()` returns the number of states, including the begin and
  end states.

### Experiment data

`ExperimentData` holds a list of `Observation` named tuples, each with the
fields `time`, `state` and `symbol`. It supports `len()` and iteration.

### Forward-backward

`forward_backward_probabilities` returns one list per step. Each list holds an
`(alpha, beta)` pair for every state. `most_probable_states` picks, at each
step, the state with the largest `alpha * beta`. Ties go to the lowest index.

### Confusion matrix and estimations

In the result of `confusion_matrix`, `matrix[i][j]` counts the steps where
state `i` was predicted and state `j` was the real state. It raises
`ValueError` if there are more predictions than observations.

`state_prediction_estimations` returns one `PredictionEstimation` per state.
Each one has these fields:

- `true_positives`
- `false_positives`
- `true_negatives`
- `false_negatives`
- `f_measure`

The f-measure is 0 for a state that was never predicted and never real. It is
NaN for a state that was predicted or real but never predicted correctly.

## Limitations

- The package only evaluates a model that is already given. It does not
  estimate or train model parameters from data.
- Probabilities are multiplied without scaling or logarithms. On long
  observation sequences they can underflow to zero.

## Running the tests

```
pip install .[test]
pytest
```