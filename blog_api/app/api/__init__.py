"""
API package containing the routers and request validators.

``router`` aggregates the domain routers and is mounted under ``/api``
by ``create_app``.
"""
