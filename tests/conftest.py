"""Pytest fixtures for API tests."""

import os
from collections.abc import Callable, Generator

os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hebrew_app.api.deps import get_db
from hebrew_app.db import models  # noqa: F401  # Imported for side effects
from hebrew_app.db.base import Base
from hebrew_app.db.models import User, VocabSet, VocabWord
from hebrew_app.main import create_app
from hebrew_app.utils.cache import cache_backend


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine, expire_on_commit=False
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture(autouse=True)
def clear_cache() -> Generator[None, None, None]:
    cache_backend.clear()
    try:
        yield
    finally:
        cache_backend.clear()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


def register_and_login(client: TestClient, email: str, password: str = "supersecure") -> str:
    client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "full_name": email.split("@")[0]},
    )
    login_response = client.post("/api/auth/login", json={"email": email, "password": password})
    return login_response.json()["access_token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def learner_headers(client: TestClient) -> dict[str, str]:
    return auth_headers(register_and_login(client, "learner@example.com"))


@pytest.fixture()
def admin_headers(client: TestClient, db_session: Session) -> dict[str, str]:
    token = register_and_login(client, "admin@example.com")
    admin = db_session.query(User).filter(User.email == "admin@example.com").one()
    admin.is_admin = True
    db_session.commit()
    return auth_headers(token)


@pytest.fixture()
def learner(db_session: Session) -> User:
    """A learner stored directly, for service level tests."""

    user = User(email="service@example.com", hashed_password="not-a-real-hash", full_name="Service")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def make_vocab_set(db_session: Session) -> Callable[..., VocabSet]:
    """Insert a vocabulary set; each word dict needs ``trans`` and ``english``."""

    def factory(set_id: str, words: list[dict], *, set_type: str = "vocabulary") -> VocabSet:
        vocab_set = VocabSet(
            id=set_id,
            title=set_id.replace("-", " ").title(),
            description="",
            total_words=len(words),
            set_type=set_type,
        )
        db_session.add(vocab_set)
        for index, word in enumerate(words):
            db_session.add(
                VocabWord(
                    id=f"{set_id}-{word['trans']}",
                    hebrew=word.get("hebrew", word["trans"]),
                    transliteration=word["trans"],
                    english=word["english"],
                    type=word.get("type", "Noun"),
                    notes=word.get("notes", ""),
                    semantic_group=word.get("semantic_group", "Objects & Things"),
                    frequency=word.get("frequency", index + 1),
                    set_id=set_id,
                    group_category=word.get("category", "Nouns"),
                    group_subcategory=word.get("subcategory"),
                    card_type="vocabulary",
                    extra_data={},
                )
            )
        db_session.commit()
        return vocab_set

    return factory


@pytest.fixture()
def genesis_words(make_vocab_set) -> VocabSet:
    return make_vocab_set(
        "genesis-1",
        [
            {"trans": "bereshit", "english": "in the beginning", "type": "Noun", "frequency": 5},
            {"trans": "elohim", "english": "God", "type": "Noun", "frequency": 1},
            {"trans": "bara", "english": "he created", "type": "Verb", "category": "Verbs", "frequency": 2},
            {"trans": "shamayim", "english": "heavens", "type": "Noun", "frequency": 3},
        ],
    )
