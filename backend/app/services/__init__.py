"""
サービス層のモジュール
"""
from .base import BaseService
from .product import ProductService, ReleaseService
from .platform import PlatformService
from .case import CaseService
from .step import StepService, PreconditionService, ExpectationService
from .run import RunService

__all__ = [
    "BaseService",

    # 製品・リリース
    "ProductService", "ReleaseService",

    # プラットフォーム
    "PlatformService",

    # テストケースとその構成要素
    "CaseService",
    "StepService", "PreconditionService", "ExpectationService",

    # テスト実行
    "RunService"
]
