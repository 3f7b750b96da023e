"""
問題リポジトリ（作成済みの問題データを読み込む窓口）

【初心者向け】
- QuizRepository: Protocol。問題の一覧取得とIDでの取得を約束する
- JsonQuizRepository: JSONファイルから問題を読み込む実装
  読み込みは初回だけ行い、以降はメモリ上のキャッシュを返す
- get_repository: 設定（QUIZ_REPOSITORY）に応じて実装を選ぶ
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from rhyme_quiz.core.settings import settings
from rhyme_quiz.quiz.models import Choice, Question
from rhyme_quiz.quiz.validator import validate_questions

# ロガー設定
logger = logging.getLogger(__name__)

# パッケージ同梱の問題データ
DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "quizzes.json"


class QuizDataError(Exception):
    """問題データの読み込み失敗（ファイルなし・形式不正・リポジトリ種別不正）"""
    pass


class QuizRepository(Protocol):
    """
    問題リポジトリのインターフェース

    見つからない場合は例外ではなく None を返す（404にするかは呼び出し側が決める）
    """

    def find_all_questions(self) -> List[Question]:
        ...

    def find_full_by_id(self, question_id: str) -> Optional[Question]:
        ...


def _parse_question(raw: Dict[str, Any]) -> Question:
    """JSONの1問分を Question に変換する"""
    return Question(
        id=raw["id"],
        question_word=raw["question_word"],
        question_vowels=raw["question_vowels"],
        explanation=raw.get("explanation", ""),
        choices=tuple(
            Choice(
                id=c["id"],
                text=c["text"],
                vowels=c["vowels"],
                is_correct=bool(c.get("is_correct", False)),
            )
            for c in raw["choices"]
        ),
        image_key=raw.get("image_key", ""),
        video_key=raw.get("video_key"),
        marquee_mode=bool(raw.get("marquee_mode", False)),
    )


def load_questions(path: Path) -> List[Question]:
    """
    JSONファイルから問題を読み込む

    Raises:
        QuizDataError: ファイルがない、またはJSON/項目が不正な場合
    """
    if not path.exists():
        raise QuizDataError(f"問題データが見つかりません: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        questions = [_parse_question(q) for q in data["quizzes"]]
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise QuizDataError(f"問題データの形式が不正です: {path}: {type(e).__name__}: {e}") from e

    # 韻のルールは実行時に強制しない（警告だけ出す）
    validate_questions(questions)

    logger.info(f"[QUIZ_DATA] 問題データ読み込み完了: {len(questions)}問 ({path})")
    return questions


class JsonQuizRepository:
    """JSONファイルベースの問題リポジトリ"""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else _configured_data_path()
        self._questions: Optional[List[Question]] = None

    def _load(self) -> List[Question]:
        if self._questions is None:
            self._questions = load_questions(self.path)
        return self._questions

    def find_all_questions(self) -> List[Question]:
        return list(self._load())

    def find_full_by_id(self, question_id: str) -> Optional[Question]:
        return next((q for q in self._load() if q.id == question_id), None)


def _configured_data_path() -> Path:
    if settings.quiz_data_path:
        return Path(settings.quiz_data_path)
    return DEFAULT_DATA_PATH


# グローバルキャッシュ（in-memory）
_cached_repository: Optional[QuizRepository] = None


def get_repository() -> QuizRepository:
    """
    問題リポジトリを取得（初回のみ作成）

    Raises:
        QuizDataError: 無効なリポジトリ種別が指定された場合
    """
    global _cached_repository

    if _cached_repository is None:
        kind = settings.quiz_repository.lower()
        if kind == "json":
            _cached_repository = JsonQuizRepository()
        else:
            raise QuizDataError(
                f"無効なリポジトリ種別: {kind}。"
                f"QUIZ_REPOSITORY環境変数に 'json' を指定してください。"
            )

    return _cached_repository


def clear_cache() -> None:
    """
    キャッシュをクリアする（テストやデータ再読み込み時に使用）
    """
    global _cached_repository
    _cached_repository = None
    logger.info("問題リポジトリのキャッシュをクリアしました")
