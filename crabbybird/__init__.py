"""A side-scrolling arcade game: flap through the gaps between scrolling pipes."""

__version__ = "1.0.0"