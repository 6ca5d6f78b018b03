"""Shared test configuration.

Loads ``.env`` then ``.env.test`` (overrides) so tests see the same
variables the app would. Unit tests do not import ``app``.
"""

from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pytest
from dotenv import load_dotenv

from domain.user.core.entities.user import User
from domain.user.core.value_objects.external_subject import ExternalSubject

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture
def inmemory_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Force the in-memory backend and fresh repository singletons."""
    from infrastructure.persistence.factory import reset_repositories

    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    reset_repositories()
    yield
    reset_repositories()


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Build a fresh User for a subject (not persisted)."""

    def _make(subject: str = "user_123", username: Optional[str] = None, **kwargs: Any) -> User:
        return User.create(
            external_subject=ExternalSubject(subject),
            username=username or subject,
            full_name=kwargs.pop("full_name", "Jane Doe"),
            email=kwargs.pop("email", f"{subject}@example.com"),
            image=kwargs.pop("image", f"https://img.example.com/{subject}.png"),
            **kwargs,
        )

    return _make
