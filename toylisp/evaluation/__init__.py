from toylisp.evaluation.evaluator import evaluate
from toylisp.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
