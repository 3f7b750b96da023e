#!/usr/bin/env python3
"""
問題データの診断スクリプト

問題数・選択肢数・韻のルール（母音パターン）を確認します。

使い方:
    python scripts/check_quiz_data.py
    python scripts/check_quiz_data.py --path path/to/quizzes.json
"""
import argparse
import sys
import logging
from pathlib import Path

# プロジェクトルートをパスに追加
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from rhyme_quiz.quiz.repository import DEFAULT_DATA_PATH, QuizDataError, load_questions
from rhyme_quiz.quiz.rhyme import extract_vowels
from rhyme_quiz.quiz.validator import validate_question

# ロガー設定
logging.basicConfig(
    level=logging.WARNING,  # WARNING 以上のみ表示
    format='%(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main() -> int:
    """メイン処理（問題があれば終了コード1）"""
    parser = argparse.ArgumentParser(description="問題データの診断")
    parser.add_argument("--path", type=Path, default=DEFAULT_DATA_PATH, help="問題データJSON")
    args = parser.parse_args()

    print("=" * 60)
    print(f"問題データ診断: {args.path}")
    print("=" * 60)

    try:
        questions = load_questions(args.path)
    except QuizDataError as e:
        print(f"❌ 読み込み失敗: {e}")
        return 1

    failed = 0
    for question in questions:
        reasons = validate_question(question)
        correct_count = sum(1 for c in question.choices if c.is_correct)
        status = "✓" if not reasons else "✗"
        print(
            f"{status} {question.id:6s} {question.question_word}"
            f"（{extract_vowels(question.question_word)}） "
            f"選択肢={len(question.choices)} 正解={correct_count}"
        )
        for reason in reasons:
            print(f"    - {reason}")
        if reasons:
            failed += 1

    print(f"\n{'='*60}")
    print(f"結果: {'全て合格 ✓' if failed == 0 else '一部失敗 ✗'}")
    print(f"合格数: {len(questions) - failed} / {len(questions)}")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
