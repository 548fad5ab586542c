"""
User API Application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic and the MongoDB-backed infrastructure.
"""
