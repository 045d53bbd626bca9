"""Rendering subpackage.

Turns :class:`grid_life.grid.Grid` snapshots into Pillow images. The renderer
only reads ``living_cells()``; it never mutates a grid.

See :mod:`grid_life.renderer.canvas` for the drawing surface.
"""
