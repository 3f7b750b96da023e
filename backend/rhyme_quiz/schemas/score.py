"""
Score API用スキーマ（集計のリクエスト・レスポンス型）
"""
from pydantic import BaseModel, Field


class Outcome(BaseModel):
    """1問分の正誤"""
    is_correct: bool


class ScoreRequest(BaseModel):
    """集計リクエスト"""
    results: list[Outcome] = Field(..., description="各問の正誤（出題順）")


class ScoreResponse(BaseModel):
    """集計レスポンス"""
    correct: int
    total: int
    percentage: int = Field(..., description="正答率（0〜100の整数、四捨五入）")
    rank: str = Field(..., description="称号")
