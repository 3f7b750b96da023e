"""
共通スキーマ定義（APIで共通利用する型）

【初心者向け】
- ErrorResponse: { "error": { "code": "...", "message": "..." } } 形式のエラー
"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """エラーレスポンス"""
    error: dict[str, str]
