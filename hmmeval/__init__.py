"""Hidden Markov model state prediction (Viterbi, forward-backward) and prediction quality estimation."""

__version__ = "0.1.0"
__all__ = ["model", "algorithms", "estimation", "cli"]