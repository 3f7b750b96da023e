"""
クイズサービス（ルーターとドメインロジックの橋渡し）

【初心者向け】
- get_question_by_index: 回答前の問題を返す。選択肢は id と text だけにする
  （正解情報はここで必ず落とす）
- submit_answer: 回答を判定する。正誤が公開されるのはこの結果だけ
- summarize_session: 最後にスコアと称号をまとめて返す
"""
import logging
import random
from typing import Any, Iterable, Optional

from rhyme_quiz.core.settings import settings
from rhyme_quiz.quiz.media import resolve_image_url, resolve_video_url
from rhyme_quiz.quiz.models import (
    ClientChoice,
    JudgeResult,
    QuestionForClient,
    ScoreResult,
)
from rhyme_quiz.quiz.repository import QuizRepository, get_repository
from rhyme_quiz.quiz.rhyme import judge_answer
from rhyme_quiz.quiz.scoring import calculate_score, get_rhyme_rank

# ロガー設定
logger = logging.getLogger(__name__)


def get_question_by_index(
    index: int,
    repository: Optional[QuizRepository] = None,
    shuffle: Optional[bool] = None,
) -> Optional[QuestionForClient]:
    """
    index番目の問題をクライアント向けの形で返す

    Args:
        index: 0始まりの問題番号
        repository: 問題リポジトリ（未指定なら設定から取得）
        shuffle: 選択肢をシャッフルするか（未指定なら QUIZ_SHUFFLE_CHOICES）

    Returns:
        QuestionForClient、範囲外なら None
    """
    repo = repository or get_repository()
    all_questions = repo.find_all_questions()

    if index < 0 or index >= len(all_questions):
        logger.info(f"問題が見つかりません: index={index}, total={len(all_questions)}")
        return None

    question = all_questions[index]

    choices = [ClientChoice(id=c.id, text=c.text) for c in question.choices]
    do_shuffle = settings.quiz_shuffle_choices if shuffle is None else shuffle
    if do_shuffle and len(choices) > 1:
        random.shuffle(choices)

    return QuestionForClient(
        id=question.id,
        question_word=question.question_word,
        image_key=question.image_key,
        choices=tuple(choices),
        total=len(all_questions),
        index=index,
        image_url=resolve_image_url(question.image_key) or None,
        video_url=resolve_video_url(question.video_key) if question.video_key else None,
        marquee_mode=question.marquee_mode,
    )


def submit_answer(
    question_id: str,
    selected_ids: Iterable[str],
    repository: Optional[QuizRepository] = None,
) -> Optional[JudgeResult]:
    """
    回答を判定する

    Returns:
        JudgeResult、問題IDが存在しなければ None
    """
    repo = repository or get_repository()
    question = repo.find_full_by_id(question_id)
    if question is None:
        logger.info(f"問題が見つかりません: question_id={question_id}")
        return None

    result = judge_answer(question, selected_ids)
    logger.debug(f"判定: question_id={question_id}, is_correct={result.is_correct}")
    return result


def summarize_session(outcomes: Iterable[Any]) -> tuple[ScoreResult, str]:
    """セッションの結果からスコアと称号を返す"""
    score = calculate_score(outcomes)
    return score, get_rhyme_rank(score.correct)
