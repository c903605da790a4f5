"""A tile-based maze game: collect every star and outrun the devils."""

__version__ = "0.1.0"