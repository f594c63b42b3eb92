"""Evaluation helpers: pit policies against each other."""

from .match import (
    EvaluationResult,
    Policy,
    RandomPolicy,
    SearchPolicy,
    evaluate_policies,
    play_game,
)

__all__ = [
    "EvaluationResult",
    "Policy",
    "RandomPolicy",
    "SearchPolicy",
    "evaluate_policies",
    "play_game",
]
