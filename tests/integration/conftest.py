"""
Fixtures for HTTP tests: the real application wired to in-memory repositories.
"""
import pytest
from fastapi.testclient import TestClient

from blog_backend.di.container import build_use_case_container


@pytest.fixture
def app(user_repo, post_repo):
    from blog_backend.main import create_application

    return create_application(container=build_use_case_container(user_repo, post_repo))


@pytest.fixture
def client(app):
    """Session cookies are Secure, so talk to the app over https."""
    with TestClient(app, base_url="https://testserver") as c:
        yield c


@pytest.fixture
def other_client(app):
    """A second browser with its own cookie jar."""
    with TestClient(app, base_url="https://testserver") as c:
        yield c


@pytest.fixture
def register():
    """POST /auth/register through the given client."""
    def _register(client, name="alice", email="alice@example.com", password="correct-pass", login_directly=False):
        return client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password, "loginDirectly": login_directly},
        )
    return _register
