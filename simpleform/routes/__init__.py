"""
SimpleForm Backend: API Routes Package
=======================================

Route Inventory:
    - index.py:      GET  /                  (API description)
    - responses.py:  POST/GET       /responses
                     GET/PUT/DELETE /responses/{id}
    - health.py:     GET  /health            (service health check)

Routes stay thin: extract request data, call validation and the store,
wrap the result. Status codes for failures come from the exception handlers.
"""
