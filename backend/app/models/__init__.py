from .base import get_session, engine
from .product import Product, Release
from .platform import Platform
from .test import TestCase, CasePlatform, RelatedCase, Step, Expectation, Precondition, Run, RunCase

__all__ = [
    "get_session", "engine",
    "Product", "Release", "Platform",
    "TestCase", "CasePlatform", "RelatedCase",
    "Step", "Expectation", "Precondition",
    "Run", "RunCase"
]

def init_db(bind=None):
    """データベーススキーマを初期化する"""
    from sqlmodel import SQLModel

    SQLModel.metadata.create_all(bind=bind or engine)
