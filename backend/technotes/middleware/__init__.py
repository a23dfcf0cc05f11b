# Middleware package init
"""
TechNotes Backend: Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID runs first so every log line of the request, including the
      access log line, carries the same correlation id
    - Logging measures duration up to the response and picks the level from
      the status code
"""
