"""Some of the most useless sorting algorithms, each sorting a sequence in place in ascending order."""

__version__ = "0.1.6"