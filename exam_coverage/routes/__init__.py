"""
Routes module - contains all API route handlers
"""

from .files import router as files_router
from .analysis import router as analysis_router
from .credential import router as credential_router

__all__ = [
    "files_router",
    "analysis_router",
    "credential_router",
]
