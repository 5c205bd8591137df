"""
methdev - build, stage and run the meth compiler during development.

Parses a small set of flags, optionally runs the external build tool
(locally or inside a Termux sandbox copy of the tree), then optionally
launches bin/meth on the canonical test input, directly or under gdb.
"""

__version__ = "0.3.0"
