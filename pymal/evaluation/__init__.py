from pymal.evaluation.evaluator import evaluate
from pymal.evaluation.apply import apply

__all__ = ["apply", "evaluate"]
