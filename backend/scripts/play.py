#!/usr/bin/env python3
"""
ターミナルで韻クイズを遊ぶスクリプト

APIサーバーを立てずに、サービス層とセッションを直接使って1周プレイする。
選択肢は番号で答える（複数ある場合はスペース区切り、例: 1 3）。

使い方:
    python scripts/play.py
    python scripts/play.py --no-shuffle
"""
import argparse
import sys
import logging
from pathlib import Path

# プロジェクトルートをパスに追加
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from rhyme_quiz.quiz.repository import QuizDataError, get_repository
from rhyme_quiz.quiz.service import get_question_by_index, submit_answer
from rhyme_quiz.quiz.session import QuizSession

# ロガー設定
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _read_selection(choice_ids: list[str]) -> list[str]:
    """入力された番号を選択肢IDに変換する（範囲外・数字以外・重複は無視）"""
    raw = input("答え（番号、スペース区切り）> ")
    selected = []
    for token in raw.split():
        if token.isdigit() and 1 <= int(token) <= len(choice_ids):
            choice_id = choice_ids[int(token) - 1]
            if choice_id not in selected:
                selected.append(choice_id)
    return selected


def play(shuffle: bool) -> None:
    """1周プレイする"""
    repository = get_repository()
    session = QuizSession()

    while session.phase != "finished":
        question = get_question_by_index(
            session.current_question_index, repository=repository, shuffle=shuffle
        )
        if question is None:
            break

        print(f"\n第{question.index + 1}問 / {question.total}: 「{question.question_word}」と韻を踏むのは？")
        for i, choice in enumerate(question.choices, start=1):
            print(f"  {i}. {choice.text}")

        choice_ids = [c.id for c in question.choices]
        for choice_id in _read_selection(choice_ids):
            session.toggle_choice(choice_id)

        result = submit_answer(question.id, session.selected_choice_ids, repository=repository)
        session.set_submit_result(result)

        print("⭕ 正解！" if result.is_correct else "❌ 不正解")
        print(f"  母音: {result.question_vowels}")
        print(f"  {result.explanation}")

        session.next_question(question.total)

    score = session.score()
    print(f"\n{'='*40}")
    print(f"結果: {score.correct} / {score.total}（{score.percentage}%）")
    print(f"称号: {session.rank()}")


def main():
    parser = argparse.ArgumentParser(description="韻クイズをターミナルで遊ぶ")
    parser.add_argument("--no-shuffle", action="store_true", help="選択肢をシャッフルしない")
    args = parser.parse_args()

    try:
        play(shuffle=not args.no_shuffle)
    except QuizDataError as e:
        logger.error(f"問題データの読み込みに失敗しました: {e}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print("\n中断しました")


if __name__ == "__main__":
    main()
