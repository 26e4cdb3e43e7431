"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database, errors),
``models`` (record types), ``repositories`` (record stores),
``services`` (business logic), ``schemas`` (API payloads) and ``api``
(versioned routes).
"""

from .main import app, create_app  # noqa: F401
