from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from app.db.session import build_engine, get_session
from app.main import app
from app.models.product import Product
from app.services.recommendation import RecommendationService, get_recommendation_service


class StubRecommender(RecommendationService):
    """Records what it was asked and answers with canned suggestions or an error."""

    def __init__(self, suggestions: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.suggestions = suggestions or []
        self.error = error
        self.calls: List[List[str]] = []

    def recommend(self, product_names: Sequence[str]) -> List[str]:
        self.calls.append(list(product_names))
        if self.error is not None:
            raise self.error
        return list(self.suggestions)


@pytest.fixture(name="engine")
def engine_fixture():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def products(session):
    """Widget (9.99), Gadget (20.00) and Gizmo (5.00), created in that order."""
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    items = [
        Product(name="Widget", description="A handy widget", category="Tools",
                price=Decimal("9.99"), stock=10, created_at=base),
        Product(name="Gadget", description="A shiny gadget", category="Electronics",
                price=Decimal("20.00"), stock=5, created_at=base + timedelta(minutes=1)),
        Product(name="Gizmo", description="Small but useful", category="Tools",
                price=Decimal("5.00"), stock=0, created_at=base + timedelta(minutes=2)),
    ]
    for product in items:
        session.add(product)
    session.commit()
    for product in items:
        session.refresh(product)
    return {product.name: product for product in items}


@pytest.fixture()
def recommender():
    return StubRecommender()


@pytest.fixture()
def client(session, recommender):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_recommendation_service] = lambda: recommender
    yield TestClient(app)
    app.dependency_overrides.clear()
