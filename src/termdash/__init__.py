"""termdash: interactive terminal dashboard on a unidirectional-data-flow runtime."""

__version__ = "0.3.0"
