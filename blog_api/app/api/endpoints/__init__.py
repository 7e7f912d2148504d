"""
Endpoint modules.

Each module defines an APIRouter; ``users`` is aggregated in
``api/router.py`` under ``/users`` while ``info`` is mounted at the
application root.
"""
