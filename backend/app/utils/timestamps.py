"""
テスト実行の開始・終了日時の変換ヘルパー

入力は時刻とオフセット (Z または ±HH:MM) を含む ISO 8601 文字列に限る。
日時は UTC の naive datetime として保存し、レスポンスでは +00:00 付きの
ISO 8601 文字列として返す。
"""
from datetime import datetime, timezone
from typing import Optional

from app.exceptions import InvalidInputException


def parse_timestamp(value: Optional[str], field: str) -> Optional[datetime]:
    """
    ISO 8601 文字列を UTC の naive datetime に変換する

    Args:
        value: 変換する文字列。None の場合は None を返す
        field: エラーメッセージに使うフィールド名 ("start" / "end")

    Raises:
        InvalidInputException: 文字列が解釈できない場合、または時刻やオフセットを含まない場合
    """
    if value is None:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None

    # 日付のみ・オフセットなしの値はどちらも tzinfo を持たない
    if parsed is None or parsed.tzinfo is None:
        raise InvalidInputException(
            f"Invalid {field} datetime format. Use ISO 8601.",
            details={"field": field, "value": value}
        )
    return parsed.astimezone(timezone.utc).replace(tzinfo=None)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """保存済みの datetime を +00:00 付きの ISO 8601 文字列にする"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()
