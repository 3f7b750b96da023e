"""
スコア集計と称号（ランク）判定
"""
from typing import Any, Iterable

from rhyme_quiz.quiz.models import ScoreResult

# 正解数 0〜5 に対応する称号（低い順）
RHYME_RANKS: tuple[str, ...] = (
    "韻の素人",
    "韻の見習い",
    "韻の黒帯",
    "韻のプロ",
    "韻の皇帝",
    "韻の神",
)


def _is_correct(outcome: Any) -> bool:
    """dict（{"is_correct": ...}）でも JudgeResult のようなオブジェクトでも読めるようにする"""
    if isinstance(outcome, dict):
        return bool(outcome.get("is_correct", False))
    return bool(getattr(outcome, "is_correct", False))


def calculate_score(outcomes: Iterable[Any]) -> ScoreResult:
    """
    回答結果の一覧から正解数・総数・正答率を計算する

    正答率は四捨五入（0.5は切り上げ）。浮動小数の誤差を避けるため整数で計算する。
    結果が0件のときは 0 を返す（ゼロ除算しない）。

    Args:
        outcomes: is_correct を持つ結果のリスト

    Returns:
        ScoreResult
    """
    flags = [_is_correct(o) for o in outcomes]
    correct = sum(1 for f in flags if f)
    total = len(flags)
    percentage = 0 if total == 0 else (correct * 200 + total) // (total * 2)
    return ScoreResult(correct=correct, total=total, percentage=percentage)


def get_rhyme_rank(correct_count: int) -> str:
    """正解数から称号を返す（範囲外の値は 0〜5 に丸める）"""
    safe_count = max(0, min(len(RHYME_RANKS) - 1, correct_count))
    return RHYME_RANKS[safe_count]
