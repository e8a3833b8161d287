"""
Model definitions.

    ModelState      Intercept + weights of the logistic classifier
    predict         Score one feature vector
    predict_stream  Score an ordered stream of feature vectors
"""

from .predictor import classify, predict, predict_stream
from .state import ModelState, load_model_state, save_model_state

__all__ = [
    "ModelState",
    "classify",
    "load_model_state",
    "predict",
    "predict_stream",
    "save_model_state",
]
