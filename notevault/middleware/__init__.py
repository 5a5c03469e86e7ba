"""
NoteVault Backend — Middleware Package
======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID: correlation ID for logs, error bodies and the response header
    - Logging: access line with status and duration
    - CORS: FastAPI's CORSMiddleware (handles preflight)
"""
