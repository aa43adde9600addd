"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from docqa.api.routers.router_utils.error_utils import status_code_for, to_http_exception

__all__ = [
    "status_code_for",
    "to_http_exception",
]
