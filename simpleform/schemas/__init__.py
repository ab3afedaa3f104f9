"""Pydantic request/response schemas for the SimpleForm API."""
