"""vincent_palette.core: foundation layer.

Contains the colour model, colour parsing, the palette builder, theme
loading, settings and the report builder. This module has NO dependencies
on vincent_palette.commands or vincent_palette.registry.
Only stdlib and PIL are allowed here.
"""
