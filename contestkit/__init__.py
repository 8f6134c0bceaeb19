"""Solutions to classic competitive-programming problems, number-theory helpers and a command-line runner."""

__version__ = "0.1.0"