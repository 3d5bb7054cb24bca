from .base import AbstractNode
from .blueprint import fit_method, replace, stripped_copy
from .codec import args, flat_values, reconstruct, train_args, tree, tree2
from .machine import Machine, machine
from .node import Node, node
from .operations import (
    Operation,
    inverse_transform,
    predict,
    predict_mean,
    predict_mode,
    transform,
)
from .queries import allsources, models
from .source import Source, source
from .training import fit, reset

__all__ = [
    "AbstractNode", "Source", "Machine", "Node", "Operation",
    "source", "machine", "node",
    "transform", "inverse_transform", "predict", "predict_mean", "predict_mode",
    "fit", "reset",
    "tree", "tree2", "reconstruct", "args", "train_args", "flat_values",
    "models", "allsources",
    "stripped_copy", "fit_method", "replace",
]
