"""
Core ports - interfaces the engine reads from.
"""

from .request import RequestContext, RequestPort

__all__ = [
    "RequestContext",
    "RequestPort",
]
