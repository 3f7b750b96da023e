"""
Quiz API用スキーマ（出題のレスポンス型）

【初心者向け】
- ChoiceOut: 回答前の選択肢。id と text だけ（正解情報は含めない）
- QuizQuestionResponse: 1問分の出題内容と、全体の問題数・現在の番号
"""
from typing import Optional
from pydantic import BaseModel, Field

from rhyme_quiz.quiz.models import QuestionForClient


class ChoiceOut(BaseModel):
    """選択肢（回答前）"""
    id: str
    text: str


class QuizQuestionResponse(BaseModel):
    """出題レスポンス"""
    id: str = Field(..., description="問題ID")
    question_word: str = Field(..., description="お題のかな")
    image_key: str = Field(..., description="画像キー")
    image_url: Optional[str] = Field(None, description="画像URL（画像キーがある場合のみ）")
    video_url: Optional[str] = Field(None, description="動画URL（動画キーがある場合のみ）")
    marquee_mode: bool = Field(default=False, description="ローマ字マーキー表示をするか")
    choices: list[ChoiceOut] = Field(..., description="選択肢（提示順はシャッフル済み）")
    total: int = Field(..., description="全問題数")
    index: int = Field(..., description="現在の問題番号（0始まり）")

    @classmethod
    def from_question(cls, question: QuestionForClient) -> "QuizQuestionResponse":
        return cls(
            id=question.id,
            question_word=question.question_word,
            image_key=question.image_key,
            image_url=question.image_url,
            video_url=question.video_url,
            marquee_mode=question.marquee_mode,
            choices=[ChoiceOut(id=c.id, text=c.text) for c in question.choices],
            total=question.total,
            index=question.index,
        )
