"""
クイズサービスのテスト
"""
from dataclasses import replace

import pytest

from rhyme_quiz.quiz.repository import JsonQuizRepository
from rhyme_quiz.quiz.service import get_question_by_index, submit_answer, summarize_session


@pytest.fixture
def repo(write_quiz_file, sample_question, multi_question):
    """画像あり（q1）と動画あり（m1）の2問"""
    video_question = replace(multi_question, video_key="test-video-key")
    return JsonQuizRepository(write_quiz_file([sample_question, video_question]))


class TestGetQuestionByIndex:
    """get_question_by_index のテスト"""

    def test_question_word(self, repo):
        question = get_question_by_index(0, repository=repo, shuffle=False)
        assert question.question_word == "とら"
        assert question.total == 2
        assert question.index == 0

    def test_choices_have_only_id_and_text(self, repo):
        """選択肢に正解情報を含めない（id と text のみ）"""
        question = get_question_by_index(0, repository=repo)
        for choice in question.choices:
            assert not hasattr(choice, "is_correct")
            assert not hasattr(choice, "vowels")
            assert choice.id and choice.text

    def test_shuffle_keeps_same_choices(self, repo):
        question = get_question_by_index(0, repository=repo, shuffle=True)
        assert sorted(c.id for c in question.choices) == ["q1-c1", "q1-c2", "q1-c3", "q1-c4"]

    def test_no_shuffle_keeps_order(self, repo):
        question = get_question_by_index(0, repository=repo, shuffle=False)
        assert [c.id for c in question.choices] == ["q1-c1", "q1-c2", "q1-c3", "q1-c4"]

    def test_image_url(self, repo):
        question = get_question_by_index(0, repository=repo)
        assert question.image_key == "tora"
        assert question.image_url == "/images/tora.jpg"

    def test_video_url_only_with_video_key(self, repo):
        """動画キーがある問題だけ video_url を返す"""
        assert get_question_by_index(0, repository=repo).video_url is None
        assert get_question_by_index(1, repository=repo).video_url == "/video/test-video-key.mp4"

    def test_no_image_key(self, repo):
        assert get_question_by_index(1, repository=repo).image_url is None

    @pytest.mark.parametrize("index", [2, 99, -1])
    def test_out_of_range(self, repo, index):
        assert get_question_by_index(index, repository=repo) is None


class TestSubmitAnswer:
    """submit_answer のテスト"""

    def test_correct(self, repo):
        result = submit_answer("q1", ["q1-c1"], repository=repo)
        assert result.is_correct is True
        assert result.correct_choice_ids == ("q1-c1",)

    def test_wrong(self, repo):
        assert submit_answer("q1", ["q1-c3"], repository=repo).is_correct is False

    def test_unknown_question(self, repo):
        assert submit_answer("nope", ["q1-c1"], repository=repo) is None


class TestSummarizeSession:
    """summarize_session のテスト"""

    def test_score_and_rank(self):
        score, rank = summarize_session([{"is_correct": True}] * 3 + [{"is_correct": False}] * 2)
        assert score.percentage == 60
        assert rank == "韻のプロ"

    def test_empty(self):
        score, rank = summarize_session([])
        assert score.total == 0
        assert rank == "韻の素人"
