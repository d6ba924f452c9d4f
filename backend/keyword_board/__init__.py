"""
Keyword Board

Paginated keyword record management: HTTP resource, storage and client controller.
"""

__version__ = "0.1.0"
