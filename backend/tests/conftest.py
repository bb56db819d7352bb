import pytest
import os

os.environ["TESTING"] = "1"
os.environ["SEED_DEFAULT_PLATFORMS"] = "False"

TEST_BASE_DIR = "/tmp/test_testcases"
os.makedirs(TEST_BASE_DIR, exist_ok=True)

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.main import app
from app.models import get_session, Platform, Product, Release, TestCase, CasePlatform


@pytest.fixture(name="engine")
def engine_fixture():
    """テスト用のインメモリSQLiteエンジンを作成"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()

@pytest.fixture(name="session")
def session_fixture(engine):
    """テスト用のデータベースセッションを作成"""
    with Session(engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(session):
    """get_session をテスト用セッションに差し替えたクライアント"""
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture(name="platforms")
def platforms_fixture(session):
    """Windows, Linux, macOS の3プラットフォームを作成"""
    platforms = [Platform(name=name) for name in ["Windows", "Linux", "macOS"]]
    session.add_all(platforms)
    session.commit()
    for platform in platforms:
        session.refresh(platform)
    return platforms

@pytest.fixture(name="product")
def product_fixture(session):
    product = Product(name="App")
    session.add(product)
    session.commit()
    session.refresh(product)
    return product

@pytest.fixture(name="release")
def release_fixture(session, product):
    release = Release(name="1.0", product_id=product.id)
    session.add(release)
    session.commit()
    session.refresh(release)
    return release

@pytest.fixture(name="test_case")
def test_case_fixture(session, platforms):
    """Windows に関連付けたケース #1 を作成"""
    case = TestCase(case_number=1, name="Login")
    session.add(case)
    session.commit()
    session.refresh(case)
    session.add(CasePlatform(case_id=case.id, platform_id=platforms[0].id))
    session.commit()
    return case
