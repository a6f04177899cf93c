# Middleware package init
"""
Irenet Backend — Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every later log line can carry the ID
    - Logging records method, path, status and duration once the response exists
"""
