"""
Judge API用スキーマ（採点のリクエスト・レスポンス型）

【初心者向け】
- SubmitRequest: selected_choice_ids（選んだ選択肢IDのリスト、空も可）
- SubmitResponse: is_correct, question_vowels, correct_choice_ids, explanation,
  choice_details（全選択肢の正誤。正解が公開されるのはここだけ）
"""
from pydantic import BaseModel, Field

from rhyme_quiz.quiz.models import JudgeResult


class SubmitRequest(BaseModel):
    """回答リクエスト"""
    selected_choice_ids: list[str] = Field(..., description="選んだ選択肢IDのリスト")


class ChoiceDetail(BaseModel):
    """採点後の選択肢"""
    id: str
    text: str
    vowels: str
    is_correct: bool


class SubmitResponse(BaseModel):
    """判定レスポンス"""
    is_correct: bool
    question_vowels: str
    correct_choice_ids: list[str]
    explanation: str
    choice_details: list[ChoiceDetail]

    @classmethod
    def from_result(cls, result: JudgeResult) -> "SubmitResponse":
        return cls(
            is_correct=result.is_correct,
            question_vowels=result.question_vowels,
            correct_choice_ids=list(result.correct_choice_ids),
            explanation=result.explanation,
            choice_details=[
                ChoiceDetail(id=c.id, text=c.text, vowels=c.vowels, is_correct=c.is_correct)
                for c in result.choice_details
            ],
        )
