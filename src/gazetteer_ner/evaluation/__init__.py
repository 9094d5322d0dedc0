"""
Evaluation of recognizer output against a gold standard.
"""

from gazetteer_ner.evaluation.metrics import evaluate, f_measure

__all__ = ["evaluate", "f_measure"]
