"""
TestCasesアプリケーションの例外クラス階層

このモジュールは、アプリケーション全体で使用される例外クラスの階層を定義します。
サービス層はエラー値を返さずに例外を送出し、API層の例外ハンドラが
各例外の status_code と message からレスポンスを組み立てます。
"""
from enum import Enum
from typing import Optional, Dict, Any, Union


class ErrorCode(Enum):
    """エラーコード定義"""
    # 一般的なエラー (1000-1999)
    GENERAL_ERROR = 1000
    CONFIGURATION_ERROR = 1001

    # 入力関連エラー (4000-4039)
    INVALID_INPUT = 4000

    # 参照関連エラー (4040-4099)
    NOT_FOUND = 4040
    REFERENCE_NOT_FOUND = 4041
    CONFLICT = 4090

    # データ処理関連エラー (5000-5999)
    DATA_ERROR = 5000
    DATA_INTEGRITY_ERROR = 5001


class TestCasesException(Exception):
    """TestCasesの基底例外クラス"""
    __test__ = False
    status_code: int = 500

    def __init__(
        self,
        message: str = "TestCasesアプリケーションエラーが発生しました",
        error_code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code.name}:{self.error_code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """例外情報を辞書形式で返す"""
        return {
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "message": self.message,
            "details": self.details
        }


class ConfigurationException(TestCasesException):
    """設定エラー"""
    def __init__(
        self,
        message: str = "設定の読み込みまたは検証に失敗しました",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class InvalidInputException(TestCasesException):
    """入力値が不正な場合のエラー（必須項目の欠落、空のリスト、自己参照、日時形式など）"""
    status_code = 400

    def __init__(
        self,
        message: str = "入力値が不正です",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, ErrorCode.INVALID_INPUT, details)


class NotFoundException(TestCasesException):
    """
    操作対象のエンティティが存在しない場合のエラー

    Args:
        entity: エンティティ名 (例: "Case", "Run")
        entity_id: 検索したID
    """
    status_code = 404

    def __init__(self, entity: str, entity_id: Union[int, str, None] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} not found",
            ErrorCode.NOT_FOUND,
            {"entity": entity, "id": entity_id}
        )


class ReferenceNotFoundException(TestCasesException):
    """
    呼び出し側が指定した外部IDが解決できない場合のエラー

    関連付けの対象（プラットフォーム、関連ケース）は 400 として扱い、
    メッセージにIDを含める。親エンティティ（リリースの製品、ステップのケースなど）は
    404 として扱い、"<Entity> not found" を返す。

    Args:
        entity: エンティティ名 (例: "Platform", "Related case")
        entity_id: 見つからなかったID
        parent: 親エンティティへの参照かどうか
    """

    def __init__(self, entity: str, entity_id: Union[int, str, None], parent: bool = False):
        self.entity = entity
        self.entity_id = entity_id
        self.parent = parent
        self.status_code = 404 if parent else 400
        message = f"{entity} not found" if parent else f"{entity} not found: {entity_id}"
        super().__init__(
            message,
            ErrorCode.REFERENCE_NOT_FOUND,
            {"entity": entity, "id": entity_id}
        )


class ConflictException(TestCasesException):
    """一意制約に違反する場合のエラー"""
    status_code = 409

    def __init__(
        self,
        message: str = "Record already exists",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, ErrorCode.CONFLICT, details)


class DataIntegrityException(TestCasesException):
    """同一IDの行が複数存在するなど、保存データの整合性が崩れている場合のエラー"""
    status_code = 500

    def __init__(
        self,
        message: str = "データの整合性が損なわれています",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, ErrorCode.DATA_INTEGRITY_ERROR, details)


def exception_to_response(exception: TestCasesException) -> Dict[str, Any]:
    """
    例外をAPIレスポンス形式に変換する

    Args:
        exception: 変換する例外

    Returns:
        APIレスポンス形式の辞書
    """
    return {"error": exception.message}
