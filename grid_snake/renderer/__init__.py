"""Rendering subpackage.

Turns a :data:`grid_snake.types.CellGrid` into a Pillow image. Every cell is
a flat colored square; the head gets its own color so the heading is readable.

See :mod:`grid_snake.renderer.texture` for the palette and composition
routines.
"""
