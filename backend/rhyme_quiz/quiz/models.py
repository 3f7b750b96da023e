"""
韻クイズの型定義（データの形を明示）

【初心者向け】
- dataclass(frozen=True): 作成後に書き換えできない軽量なクラス
- Question / Choice = 事前に作成した問題データ（実行中は読み取り専用）
- JudgeResult / ScoreResult = 採点・集計のたびに新しく作られる結果
- QuestionForClient = 回答前にクライアントへ渡す形（正解情報を含まない）
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Choice:
    """選択肢（サーバー側の完全な情報）"""
    id: str           # 問題内で一意なID（例: q1-c1）
    text: str         # 表示するかな
    vowels: str       # text の母音パターン
    is_correct: bool  # 正解かどうか（採点前はクライアントに出さない）


@dataclass(frozen=True)
class Question:
    """問題（1問分）"""
    id: str
    question_word: str
    question_vowels: str
    explanation: str
    choices: tuple[Choice, ...]
    image_key: str = ""
    video_key: Optional[str] = None
    marquee_mode: bool = False


@dataclass(frozen=True)
class ChoiceResult:
    """採点後の選択肢（正誤を公開してよい形）"""
    id: str
    text: str
    vowels: str
    is_correct: bool


@dataclass(frozen=True)
class JudgeResult:
    """1回の回答に対する判定結果"""
    is_correct: bool
    question_vowels: str
    correct_choice_ids: tuple[str, ...]
    explanation: str
    choice_details: tuple[ChoiceResult, ...]


@dataclass(frozen=True)
class ScoreResult:
    """セッション全体の集計"""
    correct: int
    total: int
    percentage: int


@dataclass(frozen=True)
class ClientChoice:
    """クライアント向け選択肢（id と text のみ）"""
    id: str
    text: str


@dataclass(frozen=True)
class QuestionForClient:
    """回答前のクライアント向け問題"""
    id: str
    question_word: str
    image_key: str
    choices: tuple[ClientChoice, ...]
    total: int
    index: int
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    marquee_mode: bool = False
