"""MarryFest backend - profile compatibility filtering, interests and matches."""

__version__ = "0.1.0"
