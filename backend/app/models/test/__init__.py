# テスト関連モデルのパッケージ
from .case import TestCase, CasePlatform, RelatedCase
from .step import Step, Expectation
from .precondition import Precondition
from .run import Run, RunCase

__all__ = [
    "TestCase",
    "CasePlatform",
    "RelatedCase",
    "Step",
    "Expectation",
    "Precondition",
    "Run",
    "RunCase"
]
