"""
Pydantic schema definitions for API payloads.

Users and posts each define their own models for records written to
and read from the persistence accessors.  Schemas are separated from
the SQLite tables to decouple API representation from persistence.
"""
