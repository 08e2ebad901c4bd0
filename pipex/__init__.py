"""Connect two commands with a pipe between an input and an output file,
with the text, formatting and line-reading helpers it carries."""

__version__ = "0.1.0"
__all__ = ["linereader", "path", "pipeline", "printf", "textutils"]