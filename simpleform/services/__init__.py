"""
SimpleForm Backend: Services Layer
===================================

Service Inventory:
    - validation.py:      validate_submission() and the ResponseFields value
    - response_store.py:  ResponseStore, single-record CRUD over the database

Services know nothing about HTTP; routes translate their results and
exceptions into responses.
"""
