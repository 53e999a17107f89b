"""Binary search tree, circular queue, stack, in-place sorts and small console exercises."""

__version__ = "0.1.0"