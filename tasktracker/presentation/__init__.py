# tasktracker/presentation/__init__.py

"""
Presentation layer: HTTP routes and the use cases they call.
"""

__all__ = [
    "http",
    "usecases",
]
