from pairlisp.evaluation.evaluator import evaluate
from pairlisp.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
