"""
スコア集計・称号判定のテスト
"""
import pytest

from rhyme_quiz.quiz.models import JudgeResult
from rhyme_quiz.quiz.scoring import RHYME_RANKS, calculate_score, get_rhyme_rank


class TestCalculateScore:
    """calculate_score のテスト"""

    def test_all_correct(self):
        """全問正解のとき correct=5, percentage=100"""
        score = calculate_score([{"is_correct": True}] * 5)
        assert (score.correct, score.total, score.percentage) == (5, 5, 100)

    def test_all_wrong(self):
        """全問不正解のとき correct=0, percentage=0"""
        score = calculate_score([{"is_correct": False}] * 5)
        assert (score.correct, score.total, score.percentage) == (0, 5, 0)

    def test_three_of_five(self):
        """3/5正解のとき percentage=60"""
        results = [{"is_correct": True}] * 3 + [{"is_correct": False}] * 2
        score = calculate_score(results)
        assert (score.correct, score.total, score.percentage) == (3, 5, 60)

    def test_empty(self):
        """結果が空のとき total=0, percentage=0"""
        score = calculate_score([])
        assert (score.correct, score.total, score.percentage) == (0, 0, 0)

    @pytest.mark.parametrize("correct, total, expected", [
        (1, 8, 13),   # 12.5 → 13（0.5は切り上げ）
        (1, 3, 33),   # 33.33...
        (2, 3, 67),   # 66.66...
        (3, 8, 38),   # 37.5 → 38
        (5, 8, 63),   # 62.5 → 63
    ])
    def test_round_half_up(self, correct, total, expected):
        """正答率は四捨五入"""
        results = [{"is_correct": True}] * correct + [{"is_correct": False}] * (total - correct)
        assert calculate_score(results).percentage == expected

    def test_order_does_not_matter(self):
        """並び順で結果は変わらない"""
        a = calculate_score([{"is_correct": True}, {"is_correct": False}, {"is_correct": True}])
        b = calculate_score([{"is_correct": False}, {"is_correct": True}, {"is_correct": True}])
        assert a == b

    def test_accepts_objects_with_attribute(self):
        """JudgeResult のような is_correct 属性を持つオブジェクトも数えられる"""
        result = JudgeResult(
            is_correct=True,
            question_vowels="おあ",
            correct_choice_ids=("c1",),
            explanation="",
            choice_details=(),
        )
        score = calculate_score([result, {"is_correct": False}])
        assert (score.correct, score.total, score.percentage) == (1, 2, 50)


class TestGetRhymeRank:
    """get_rhyme_rank のテスト"""

    def test_lowest_and_highest(self):
        assert get_rhyme_rank(0) == "韻の素人"
        assert get_rhyme_rank(5) == "韻の神"

    def test_each_rank(self):
        """0〜5 がそれぞれの称号になる"""
        assert [get_rhyme_rank(i) for i in range(6)] == list(RHYME_RANKS)
        assert len(RHYME_RANKS) == 6

    @pytest.mark.parametrize("count, clamped", [(-1, 0), (-100, 0), (6, 5), (10, 5)])
    def test_out_of_range_is_clamped(self, count, clamped):
        """範囲外は 0〜5 に丸める"""
        assert get_rhyme_rank(count) == get_rhyme_rank(clamped)
