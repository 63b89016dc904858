# Middleware package init
"""
Customer API — Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: every later log line and error body can carry it
    2. Logging: records status and duration once the response is ready
    3. CORS: handles preflight requests for browser clients

Authentication is NOT middleware here: it runs as a per-route dependency,
so open routes never parse the Authorization header.
"""
