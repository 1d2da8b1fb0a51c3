from .square import create_from_matrix

__all__ = [
    "create_from_matrix",
]
