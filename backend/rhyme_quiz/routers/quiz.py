"""
Quiz APIルーター（出題）
"""
import logging
from fastapi import APIRouter

from rhyme_quiz.core.errors import raise_internal_error, raise_invalid_input, raise_not_found
from rhyme_quiz.quiz.repository import QuizDataError
from rhyme_quiz.quiz.service import get_question_by_index
from rhyme_quiz.schemas.common import ErrorResponse
from rhyme_quiz.schemas.quiz import QuizQuestionResponse

# ロガー設定
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/next",
    response_model=QuizQuestionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def next_question(index: int = 0) -> QuizQuestionResponse:
    """
    index番目の問題を出題する

    - index: 0始まり。省略時は0
    - 選択肢は id と text のみ（正解情報は返さない）
    - 範囲外なら NOT_FOUND（HTTP 404）
    """
    if index < 0:
        raise_invalid_input("index は0以上を指定してください。")

    try:
        question = get_question_by_index(index)
    except QuizDataError as e:
        logger.error(f"問題データの読み込みに失敗しました: {e}")
        raise_internal_error("問題データを読み込めませんでした。")

    if question is None:
        raise_not_found("問題が見つかりません。")

    return QuizQuestionResponse.from_question(question)
