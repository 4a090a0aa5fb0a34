"""Shared fixtures: an in-memory catalog database behind the FastAPI app."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from storefront.core.database import Base, get_db
from storefront.models import (
    Banner,
    Category,
    Logo,
    Product,
    Salesperson,
    SocialLink,
    Store,
    Subcategory,
)

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def api(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def add_product(db, id: int, subcategoria_id: int | None, **fields) -> Product:
    values = {
        "nome": f"Produto {id}",
        "preco": 100,
        "status": "ativo",
        "created_at": BASE_TIME + timedelta(minutes=id),
    }
    values.update(fields)
    product = Product(id=id, subcategoria_id=subcategoria_id, **values)
    db.add(product)
    return product


@pytest.fixture
def catalog(db_session):
    """
    Two categories:

    * 1 "Tintas" with active subcategories 10, 11 and inactive 12
    * 2 "Elétrica" with active subcategory 20
    """
    db = db_session
    db.add_all([
        Category(id=1, nome="Tintas", ativo=True, ordem=1, created_at=BASE_TIME),
        Category(id=2, nome="Elétrica", ativo=True, ordem=2, created_at=BASE_TIME),
        Category(id=3, nome="Antiga", ativo=False, ordem=3, created_at=BASE_TIME),
    ])
    db.add_all([
        Subcategory(id=10, nome="Acrílicas", categoria_id=1, ativo=True, ordem=2, created_at=BASE_TIME),
        Subcategory(id=11, nome="Esmaltes", categoria_id=1, ativo=True, ordem=1, created_at=BASE_TIME),
        Subcategory(id=12, nome="Descontinuadas", categoria_id=1, ativo=False, ordem=3, created_at=BASE_TIME),
        Subcategory(id=20, nome="Fios", categoria_id=2, ativo=True, ordem=1, created_at=BASE_TIME),
    ])
    db.flush()
    add_product(db, 1, 10, nome="Tinta Acrílica Fosca Branca 18L", tipo_tinta=True, descricao="Rende muito")
    add_product(db, 2, 11, nome="Esmalte Sintético Azul", tipo_tinta=True, promocao_mes=True, preco_promocao=80)
    add_product(db, 3, 12, nome="Tinta Antiga", tipo_tinta=True)
    add_product(db, 4, 20, nome="Fio Flexível 2,5mm", tipo_eletrico=True, voltagem="750V", novidade=True)
    add_product(db, 5, 20, nome="Disjuntor", tipo_eletrico=True, status="inativo")
    db.commit()
    return db
