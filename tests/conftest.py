import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import grocery_bot.db as db
from grocery_bot.main import app
from grocery_bot.models import Base, GroceryListItem as GroceryListRow
from grocery_bot.voice.list_operations import GroceryListItem, InMemoryGroceryList

# (name, quantity, note) in display order; ids are assigned 1..n
SEED_ITEMS = [
    ("Milk", 1, None),
    ("Apples", 3, "green"),
    ("Eggs", 12, None),
]


@pytest.fixture
def session_factory():
    """sessionmaker bound to a fresh, seeded in-memory SQLite database.

    StaticPool keeps every session on the same connection, so they all see
    the same in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    with factory() as session:
        session.add_all([
            GroceryListRow(name=name, quantity=quantity, note=note, sort_order=order)
            for order, (name, quantity, note) in enumerate(SEED_ITEMS)
        ])
        session.commit()

    yield factory
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory, monkeypatch):
    """FastAPI TestClient whose requests use the seeded test database."""
    # init_db runs on startup against db.engine
    monkeypatch.setattr(db, "engine", session_factory.kw["bind"])
    monkeypatch.setattr(db, "SessionLocal", session_factory)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[db.get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def grocery_list():
    """In-memory list with the same contents as the seeded database."""
    return InMemoryGroceryList([
        GroceryListItem(id=order + 1, name=name, quantity=quantity, note=note, order=order)
        for order, (name, quantity, note) in enumerate(SEED_ITEMS)
    ])
