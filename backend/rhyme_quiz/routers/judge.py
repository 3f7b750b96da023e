"""
Judge APIルーター（回答の判定）
"""
import logging
from fastapi import APIRouter

from rhyme_quiz.core.errors import raise_internal_error, raise_not_found
from rhyme_quiz.quiz.repository import QuizDataError
from rhyme_quiz.quiz.service import submit_answer
from rhyme_quiz.schemas.common import ErrorResponse
from rhyme_quiz.schemas.judge import SubmitRequest, SubmitResponse

# ロガー設定
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{quiz_id}/submit",
    response_model=SubmitResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def judge_answer(quiz_id: str, request: SubmitRequest) -> SubmitResponse:
    """
    回答を判定する

    - quiz_id: 必須。存在しない場合はNOT_FOUNDエラー（HTTP 404 + JSON）
    - selected_choice_ids: 必須（空リスト可）。選んだ選択肢のID

    エラーレスポンス形式:
    {
      "error": {
        "code": "NOT_FOUND",
        "message": "問題が見つかりません。"
      }
    }
    """
    try:
        result = submit_answer(quiz_id, request.selected_choice_ids)
    except QuizDataError as e:
        logger.error(f"問題データの読み込みに失敗しました: {e}")
        raise_internal_error("問題データを読み込めませんでした。")

    if result is None:
        raise_not_found("問題が見つかりません。")

    return SubmitResponse.from_result(result)
