from lisk.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
