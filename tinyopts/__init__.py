"""Small, tolerant command-line option parser."""

from .parser import ArgumentParser, OptionSpec

__all__ = ["ArgumentParser", "OptionSpec"]
