from datetime import datetime

import pytest
from sqlalchemy import DateTime

from app.exceptions import NotFoundException, DataIntegrityException
from app.models import Product, Release, Step, CasePlatform, Run, RunCase, Platform
from app.repositories import (
    ProductRepository, ReleaseRepository, StepRepository, PlatformRepository,
    CasePlatformRepository, RunRepository, RunCaseRepository
)


def test_insert_assigns_id_and_find_returns_entity(session):
    repo = ProductRepository(session)
    product = repo.insert(Product(name="App"))

    assert product.id is not None
    found = repo.find(product.id)
    assert found.name == "App"
    assert found.id == product.id

def test_find_missing_raises_not_found(session):
    repo = ProductRepository(session)

    with pytest.raises(NotFoundException) as exc_info:
        repo.find(999)

    assert exc_info.value.message == "Product not found"
    assert exc_info.value.status_code == 404

def test_delete_then_find_raises_not_found(session):
    repo = ProductRepository(session)
    product = repo.insert(Product(name="App"))
    product_id = product.id

    repo.delete(product)

    with pytest.raises(NotFoundException):
        repo.find(product_id)

def test_update_without_id_raises(session):
    repo = ProductRepository(session)

    with pytest.raises(DataIntegrityException):
        repo.update(Product(name="Unsaved"))

def test_update_changes_fields(session):
    repo = ProductRepository(session)
    product = repo.insert(Product(name="App"))

    product.name = "App 2"
    repo.update(product)

    assert repo.find(product.id).name == "App 2"

def test_find_all_is_ordered_by_id(session):
    repo = PlatformRepository(session)
    for name in ["Linux", "Android", "Windows"]:
        repo.insert(Platform(name=name))

    assert [p.name for p in repo.find_all()] == ["Linux", "Android", "Windows"]

def test_find_by_product_id_filters_releases(session):
    products = ProductRepository(session)
    releases = ReleaseRepository(session)
    app_product = products.insert(Product(name="App"))
    web_product = products.insert(Product(name="Web"))
    releases.insert(Release(name="1.0", product_id=app_product.id))
    releases.insert(Release(name="1.1", product_id=app_product.id))
    releases.insert(Release(name="beta", product_id=web_product.id))

    result = releases.find_by_product_id(app_product.id)

    assert [r.name for r in result] == ["1.0", "1.1"]

def test_steps_by_case_are_ordered_by_order_then_id(session):
    repo = StepRepository(session)
    repo.insert(Step(order=2, description="Tap login", case_id=1))
    repo.insert(Step(order=1, description="Open app", case_id=1))
    repo.insert(Step(order=2, description="Enter password", case_id=1))
    repo.insert(Step(order=1, description="Other case", case_id=2))

    steps = repo.find_by_case_id(1)

    assert [(s.order, s.description) for s in steps] == [
        (1, "Open app"),
        (2, "Tap login"),
        (2, "Enter password"),
    ]

def test_find_by_name(session):
    repo = PlatformRepository(session)
    repo.insert(Platform(name="iOS"))

    assert repo.find_by_name("iOS").name == "iOS"
    assert repo.find_by_name("Android") is None

def test_delete_by_case_id_only_touches_that_case(session):
    repo = CasePlatformRepository(session)
    repo.insert(CasePlatform(case_id=1, platform_id=10))
    repo.insert(CasePlatform(case_id=1, platform_id=11))
    repo.insert(CasePlatform(case_id=2, platform_id=10))

    removed = repo.delete_by_case_id(1)

    assert removed == 2
    assert repo.find_by_case_id(1) == []
    assert [link.platform_id for link in repo.find_by_case_id(2)] == [10]

def test_delete_by_run_id(session):
    repo = RunCaseRepository(session)
    repo.insert(RunCase(run_id=3, case_id=1))
    repo.insert(RunCase(run_id=3, case_id=2))

    assert repo.delete_by_run_id(3) == 2
    assert repo.find_by_run_id(3) == []

def test_run_dates_are_stored_as_naive_utc(session):
    repo = RunRepository(session)
    run = repo.insert(Run(
        name="Sprint 1",
        release_id=1,
        start=datetime(2026, 1, 15, 10, 0, 0),
        end=datetime(2026, 1, 20, 18, 0, 0)
    ))
    run_id = run.id
    session.commit()
    session.expire_all()

    stored = repo.find(run_id)

    assert stored.start == datetime(2026, 1, 15, 10, 0, 0)
    assert stored.end == datetime(2026, 1, 20, 18, 0, 0)

def test_run_date_columns_have_no_timezone():
    for column in ("start", "end"):
        column_type = Run.__table__.c[column].type
        assert isinstance(column_type, DateTime)
        assert column_type.timezone is False
