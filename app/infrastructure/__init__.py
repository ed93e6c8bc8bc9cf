"""
Infrastructure Layer
====================

Concrete implementations of domain contracts.

Contains:
- MongoDB connection handle
- MongoDB driver repository
"""
