"""
問題データのバリデーション

【初心者向け】
- 作成済みの問題が「韻」のルールを満たしているかを確認する
- 問題があっても例外は出さず、理由コードのリストを返すだけ
  （読み込み時にはログの警告として出す）
"""
import logging

from rhyme_quiz.quiz.models import Question
from rhyme_quiz.quiz.rhyme import extract_vowels

# ロガー設定
logger = logging.getLogger(__name__)

# 1問あたりの選択肢の上限
MAX_CHOICES = 15


def validate_question(question: Question) -> list[str]:
    """
    1問分の問題データを検査する

    Returns:
        理由コードのリスト（空なら問題なし）
        - no_correct_choice: 正解の選択肢がない
        - question_vowels_mismatch: question_vowels が問題文から抽出した母音と違う
        - choice_vowels_mismatch:<id>: 選択肢の vowels が text から抽出した母音と違う
        - correct_choice_not_rhyming:<id>: 正解の選択肢が問題と韻を踏んでいない
        - duplicate_choice_id:<id>: 選択肢IDの重複
        - too_many_choices: 選択肢が多すぎる
    """
    reasons: list[str] = []

    if not any(c.is_correct for c in question.choices):
        reasons.append("no_correct_choice")

    if extract_vowels(question.question_word) != question.question_vowels:
        reasons.append("question_vowels_mismatch")

    if len(question.choices) > MAX_CHOICES:
        reasons.append("too_many_choices")

    seen_ids: set[str] = set()
    for choice in question.choices:
        if choice.id in seen_ids:
            reasons.append(f"duplicate_choice_id:{choice.id}")
        seen_ids.add(choice.id)

        if extract_vowels(choice.text) != choice.vowels:
            reasons.append(f"choice_vowels_mismatch:{choice.id}")

        if choice.is_correct and choice.vowels != question.question_vowels:
            reasons.append(f"correct_choice_not_rhyming:{choice.id}")

    return reasons


def validate_questions(questions: list[Question]) -> dict[str, list[str]]:
    """
    全問を検査し、問題のあったものだけを {question_id: reasons} で返す
    """
    problems: dict[str, list[str]] = {}
    for question in questions:
        reasons = validate_question(question)
        if reasons:
            logger.warning(f"[QUIZ_DATA] {question.id}: {', '.join(reasons)}")
            problems[question.id] = reasons
    return problems
