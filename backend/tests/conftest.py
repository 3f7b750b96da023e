"""
テスト共通のフィクスチャ
"""
import json

import pytest

from rhyme_quiz.core.settings import settings
from rhyme_quiz.quiz import repository
from rhyme_quiz.quiz.models import Choice, Question


@pytest.fixture
def sample_question() -> Question:
    """正解1つ・不正解3つの問題"""
    return Question(
        id="q1",
        question_word="とら",
        question_vowels="おあ",
        explanation="「とら」の母音は「おあ」。同じ母音パターンの「おか」が正解。",
        image_key="tora",
        choices=(
            Choice(id="q1-c1", text="おか", vowels="おあ", is_correct=True),
            Choice(id="q1-c2", text="ぶた", vowels="うあ", is_correct=False),
            Choice(id="q1-c3", text="ふぐ", vowels="うう", is_correct=False),
            Choice(id="q1-c4", text="さる", vowels="あう", is_correct=False),
        ),
    )


@pytest.fixture
def multi_question() -> Question:
    """正解が2つある問題"""
    return Question(
        id="m1",
        question_word="とら",
        question_vowels="おあ",
        explanation="テスト用",
        choices=(
            Choice(id="c1", text="おか", vowels="おあ", is_correct=True),
            Choice(id="c2", text="こま", vowels="おあ", is_correct=True),
            Choice(id="c3", text="ぶた", vowels="うあ", is_correct=False),
        ),
    )


def _raw_question(question: Question) -> dict:
    raw = {
        "id": question.id,
        "question_word": question.question_word,
        "question_vowels": question.question_vowels,
        "image_key": question.image_key,
        "explanation": question.explanation,
        "choices": [
            {"id": c.id, "text": c.text, "vowels": c.vowels, "is_correct": c.is_correct}
            for c in question.choices
        ],
    }
    if question.video_key:
        raw["video_key"] = question.video_key
    return raw


@pytest.fixture
def write_quiz_file(tmp_path):
    """Question のリストを問題データJSONとして書き出し、そのパスを返す"""
    def _write(questions: list[Question], name: str = "quizzes.json"):
        path = tmp_path / name
        data = {"quizzes": [_raw_question(q) for q in questions]}
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_repository_cache():
    """テストごとにリポジトリのキャッシュを捨てる"""
    repository.clear_cache()
    yield
    repository.clear_cache()


@pytest.fixture
def use_quiz_file(monkeypatch, write_quiz_file):
    """グローバル設定の QUIZ_DATA_PATH を一時ファイルに差し替える"""
    def _use(questions: list[Question]):
        path = write_quiz_file(questions)
        monkeypatch.setattr(settings, "quiz_data_path", str(path))
        return path
    return _use
