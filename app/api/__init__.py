"""
API layer for the User API.

Exposes the ``/users`` CRUD endpoints and the ``/health`` check.
"""
