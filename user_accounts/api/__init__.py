"""
API layer for the User Accounts Backend.

Exposes the HTTP endpoints under /api (register, login, me, useraccount).
"""
