"""CSS colour keywords, a style model, an XML tree, image helpers and a text renderer for SVG Native."""

__version__ = "0.1.0"