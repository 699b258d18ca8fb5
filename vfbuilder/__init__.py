"""VFBuilder: fleet building, validation and point costs for a miniatures wargame."""

__version__ = "1.0.0"
