"""MIDI building blocks, port handling and editor-completion helpers for the lcvgc music language."""

__version__ = "0.1.0"