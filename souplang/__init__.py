"""Parser, syntax tree and error reporter for the soup language, with its parser building blocks."""

__version__ = "0.1.0"