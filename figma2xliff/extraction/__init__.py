"""Input parsing modules."""

from .variables_parser import VariablesParser

__all__ = ["VariablesParser"]
