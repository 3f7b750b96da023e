"""
Score APIルーター（最終結果の集計）
"""
from fastapi import APIRouter

from rhyme_quiz.quiz.service import summarize_session
from rhyme_quiz.schemas.score import ScoreRequest, ScoreResponse

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
async def score_session(request: ScoreRequest) -> ScoreResponse:
    """正誤の一覧から正解数・正答率・称号を返す"""
    score, rank = summarize_session(request.results)
    return ScoreResponse(
        correct=score.correct,
        total=score.total,
        percentage=score.percentage,
        rank=rank,
    )
