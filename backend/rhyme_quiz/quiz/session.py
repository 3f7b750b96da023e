"""
1回のプレイ（5問）の進行状態

【初心者向け】
- フェーズは answering（回答中）→ result（結果表示）→ answering または finished
- 採点はサーバー側の judge_answer が行う。ここは「どこまで進んだか」と
  「各問の正誤」を覚えておくだけ
- 許されない順番で操作したら InvalidTransitionError
"""
from dataclasses import dataclass, field
from typing import Literal, Optional

from rhyme_quiz.quiz.models import JudgeResult, ScoreResult
from rhyme_quiz.quiz.scoring import calculate_score, get_rhyme_rank

Phase = Literal["answering", "result", "finished"]


class InvalidTransitionError(Exception):
    """現在のフェーズでは実行できない操作"""
    pass


@dataclass
class QuizSession:
    """プレイ中の状態"""
    current_question_index: int = 0
    selected_choice_ids: list[str] = field(default_factory=list)
    results: list[JudgeResult] = field(default_factory=list)
    phase: Phase = "answering"
    submit_result: Optional[JudgeResult] = None

    def _require(self, phase: Phase, action: str) -> None:
        if self.phase != phase:
            raise InvalidTransitionError(
                f"{action} は {phase} フェーズでのみ実行できます（現在: {self.phase}）"
            )

    def toggle_choice(self, choice_id: str) -> None:
        """選択肢の選択/解除を切り替える"""
        self._require("answering", "toggle_choice")
        if choice_id in self.selected_choice_ids:
            self.selected_choice_ids.remove(choice_id)
        else:
            self.selected_choice_ids.append(choice_id)

    def set_submit_result(self, result: JudgeResult) -> None:
        """判定結果を受け取り、結果表示フェーズへ進む"""
        self._require("answering", "set_submit_result")
        self.submit_result = result
        self.results.append(result)
        self.phase = "result"

    def next_question(self, total: int) -> None:
        """次の問題へ進む。最後の問題の後は finished"""
        self._require("result", "next_question")
        self.current_question_index += 1
        self.selected_choice_ids = []
        self.submit_result = None
        self.phase = "finished" if self.current_question_index >= total else "answering"

    def reset(self) -> None:
        """最初からやり直す"""
        self.current_question_index = 0
        self.selected_choice_ids = []
        self.results = []
        self.phase = "answering"
        self.submit_result = None

    def score(self) -> ScoreResult:
        return calculate_score(self.results)

    def rank(self) -> str:
        return get_rhyme_rank(self.score().correct)
