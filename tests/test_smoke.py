"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify user_accounts package can be imported."""
    from user_accounts.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "jwt_secret_key")


def test_routes_registered():
    """All account endpoints are mounted under /api."""
    from user_accounts.main import app

    paths = app.openapi()["paths"]
    assert "post" in paths["/api/register"]
    assert "post" in paths["/api/login"]
    assert "get" in paths["/api/me"]
    assert {"get", "put", "delete"} <= set(paths["/api/useraccount"])
