# Middleware package init
"""
Foodie Finds API: Middleware Package
======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation id for log lines and the X-Request-ID header
    2. Logging: one access line per request with status and duration
    3. CORS: FastAPI's CORSMiddleware, any origin by default
"""
