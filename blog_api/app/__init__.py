"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database, errors and
middleware), ``schemas`` (request and response models), ``services``
(persistence accessors for users and posts) and ``api`` (routers and
request validators).
"""

from .main import app  # noqa: F401
