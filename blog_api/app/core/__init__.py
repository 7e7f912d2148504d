"""
Cross‑cutting infrastructure: settings, logging, the SQLite connection
helpers, error types with their handlers and the request logger.
"""
