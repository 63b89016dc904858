# Routes package init
"""
Customer API — Routes Package
==============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - customers.py: GET    /customers          (list, authenticated)
                    GET    /customers/{id}     (detail, authenticated)
                    POST   /customers          (create, Admin role)
                    PUT    /customers/{id}     (full replace, open)
                    DELETE /customers/{id}     (delete, DeleteUser policy)
    - health.py:    GET    /health             (service health check)

Design Principle:
    Routes are THIN — they decode the request, call the service, and pick
    the status code. Authorization is declared per route as a dependency.
"""
