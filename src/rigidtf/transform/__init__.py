"""Rigid transforms and their composition."""

from .compose import compose
from .model import Transform

__all__ = [
    "Transform",
    "compose",
]
