"""
リポジトリ層のモジュール
"""
from .base import Repository
from .product import ProductRepository, ReleaseRepository
from .platform import PlatformRepository
from .case import TestCaseRepository, CasePlatformRepository, RelatedCaseRepository
from .step import StepRepository, PreconditionRepository, ExpectationRepository
from .run import RunRepository, RunCaseRepository

__all__ = [
    "Repository",
    "ProductRepository", "ReleaseRepository",
    "PlatformRepository",
    "TestCaseRepository", "CasePlatformRepository", "RelatedCaseRepository",
    "StepRepository", "PreconditionRepository", "ExpectationRepository",
    "RunRepository", "RunCaseRepository"
]
