"""Rendering subpackage.

Read-only views of a session ``State``:

* :mod:`maze_chase.renderer.texture` draws an RGBA Pillow image (walls,
  pickups, player with a facing marker, adversaries tinted per tag).
* :mod:`maze_chase.renderer.text` prints the maze as characters.

Renderers never modify the state they are given.
"""
