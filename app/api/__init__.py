"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Error handlers: routing and request-body failures
- Dependencies: Dependency injection setup
"""
