"""
SimpleForm Backend: Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID used by logs and error bodies
    2. Logging: one access line per request, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
