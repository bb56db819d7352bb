from sqlmodel import create_engine, Session
import os
from app.config import config

# データベース接続設定
# テスト環境の場合は一時ディレクトリのSQLiteを使用
if os.environ.get("TESTING") == "1":
    TEST_DB_PATH = "/tmp/test_testcases/test.db"
    DATABASE_URL = f"sqlite:///{TEST_DB_PATH}"
else:
    DATABASE_URL = config.get("database", "URL")

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

def get_session():
    """リクエストごとのセッションを返す"""
    with Session(engine) as session:
        yield session
