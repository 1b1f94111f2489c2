"""
Data access layer.

Design rules:
- Views call ONLY functions in this package (data.service).
- Every DB call goes through a fault boundary that logs and falls back to a default.
- No env var reads here (config-only).
- The connection pool is created once by the caller and injected via SqlClient.
"""
