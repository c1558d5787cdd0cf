"""HTTP API for document downloads."""

from .app import build_app, create_app, header_user_resolver

__all__ = ['build_app', 'create_app', 'header_user_resolver']
