"""
母音抽出と正誤判定（韻クイズの中心ロジック）

【初心者向け】
- extract_vowels: かな1文字ずつを母音（あいうえお）か「ん」に置き換える
  例: とら → おあ、くるま → ううあ
- judge_answer: 選んだ選択肢の集合が正解の集合と完全に一致するかで判定する
  （部分点なし・余計な選択もNG）
- どちらも副作用のない純粋関数。同時に何度呼んでも結果は同じ
"""
from types import MappingProxyType
from typing import Iterable, Mapping

from rhyme_quiz.quiz.models import ChoiceResult, JudgeResult, Question

# 行ごとのかな（あ段〜お段の順）。存在しない段は含めない
_ROWS_BY_VOWEL = {
    "あ": "あかさたなはまやらわがざだばぱ",
    "い": "いきしちにひみりぎじぢびぴ",
    "う": "うくすつぬふむゆるぐずづぶぷ",
    "え": "えけせてねへめれげぜでべぺ",
    "お": "おこそとのほもよろをごぞどぼぽ",
    "ん": "ん",
}

# かな → 母音 の対応表（起動時に1回だけ作る読み取り専用の表）
VOWEL_MAP: Mapping[str, str] = MappingProxyType({
    kana: vowel
    for vowel, kanas in _ROWS_BY_VOWEL.items()
    for kana in kanas
})


def extract_vowels(text: str) -> str:
    """
    かな文字列から母音パターンを取り出す

    表にない文字（ー、小さいかな、カタカナ、記号、英数字など）は
    何も出力せずに読み飛ばす。そのため出力は入力より短くなることがある。

    Args:
        text: かな文字列（空文字可）

    Returns:
        母音パターン（あ/い/う/え/お/ん の並び）
    """
    return "".join(VOWEL_MAP.get(char, "") for char in text)


def judge_answer(question: Question, selected_ids: Iterable[str]) -> JudgeResult:
    """
    回答を判定する

    - 正解IDは問題の選択肢の順番のまま集める
    - 選択IDは集合として扱う（重複は1つに数える）
    - 選択集合と正解集合が完全一致したときだけ正解
    - choice_details の is_correct は正解集合から計算し直す

    Args:
        question: 判定対象の問題
        selected_ids: 回答者が選んだ選択肢ID

    Returns:
        JudgeResult
    """
    correct_choice_ids = tuple(c.id for c in question.choices if c.is_correct)
    correct_set = set(correct_choice_ids)
    selected_set = set(selected_ids)

    is_correct = (
        len(selected_set) == len(correct_set)
        and all(choice_id in correct_set for choice_id in selected_set)
    )

    return JudgeResult(
        is_correct=is_correct,
        question_vowels=question.question_vowels,
        correct_choice_ids=correct_choice_ids,
        explanation=question.explanation,
        choice_details=tuple(
            ChoiceResult(
                id=c.id,
                text=c.text,
                vowels=c.vowels,
                is_correct=c.id in correct_set,
            )
            for c in question.choices
        ),
    )
