"""Sort integers with two stacks and a restricted set of instructions, with small string, memory, list, line-reading and printf helpers."""

__version__ = "0.1.0"