"""Package operators for querying and installing packages.

This module provides the abstract operator interface and the concrete
implementations for the official repositories (pacman) and the AUR (yay).
"""

from archsetup.operators.base import Operator
from archsetup.operators.pacman import PacmanOperator
from archsetup.operators.yay import YayOperator

__all__ = ["Operator", "PacmanOperator", "YayOperator"]
