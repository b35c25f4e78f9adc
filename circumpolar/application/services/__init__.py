# circumpolar/application/services/__init__.py
from .geodesy import GeodesyEngine
from .user_input_parser import CoordinateParser

__all__ = [
    "GeodesyEngine",
    "CoordinateParser",
]
