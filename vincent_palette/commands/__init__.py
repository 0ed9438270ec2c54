"""CLI commands.

Every module in this package that defines a `command` object is
registered by vincent_palette.registry.discover(). The module docstring
is the command's documentation.
"""
