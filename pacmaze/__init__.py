"""A maze-chase arcade game with pellets, fruit and three hunting ghosts."""

__version__ = "0.1.0"