"""
User Accounts Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, domain model and the MongoDB-backed account store.
"""
