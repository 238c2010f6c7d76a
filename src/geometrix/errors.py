"""
Typed errors raised by geometrix.
"""


class GeometryError(Exception):
    """Base error for the package."""


class DecodeError(GeometryError, ValueError):
    """
    JSON data does not match the expected structure.

    Attributes
    ----------
    path : str
        JSON path of the offending value, e.g. ``.centerPoint[1]``.
        Empty for the document root.
    description : str
        What was expected and what was found instead.
    """

    def __init__(self, description: str, path: str = ""):
        self.description = description
        self.path = path
        location = path if path else "<root>"
        super().__init__(f"at {location}: {description}")

    def nested(self, prefix: str) -> "DecodeError":
        """Return a copy of this error located under ``prefix``."""
        return DecodeError(self.description, prefix + self.path)
