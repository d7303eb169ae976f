"""Plottext - Compile text into pen-plotter motion programs.

Plottext lays out a block of text in a TrueType/OpenType font, flattens each
glyph's outline into line segments and sequences the pen moves into a G-code
program for a pen-plotting machine.

Example:
    $ plottext "Hello" --font-path Quicksand.ttf -o hello.gcode

This will write hello.gcode tracing every contour of "Hello" with pen-up
travel between strokes.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
