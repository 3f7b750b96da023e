"""
Health check APIルーター（死活確認用）

【初心者向け】
- GET /health: サーバーが生きていて、問題データを読めるか確認するエンドポイント
- 問題データが読めない場合も status は返す（degraded）
"""
import logging
from fastapi import APIRouter

from rhyme_quiz.quiz.repository import QuizDataError, get_repository

# ロガー設定
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health_check():
    """ヘルスチェック用エンドポイント"""
    try:
        question_count = len(get_repository().find_all_questions())
    except QuizDataError as e:
        logger.warning(f"ヘルスチェック: 問題データを読み込めません: {e}")
        return {"status": "degraded", "question_count": 0}
    return {"status": "ok", "question_count": question_count}
