import pytest

from interview.scoring import AnswerScorer


def words(count, word="word"):
    return " ".join([word] * count)


class TestTechnicalScore:
    @pytest.mark.parametrize("count,expected", [
        (19, 3),
        (20, 5),
        (100, 5),
        (101, 7),
    ])
    def test_word_count_boundaries(self, count, expected):
        assert AnswerScorer.score_technical("q", words(count)) == expected

    def test_empty_answer_only_gets_length_penalty(self):
        assert AnswerScorer.score_technical("q", "") == 3

    def test_technical_term_bonus_is_capped(self):
        answer = "algorithm architecture optimization scalability"
        assert AnswerScorer.score_technical("q", answer) == 5

    def test_digit_example_and_problem_bonuses(self):
        answer = "In one project I fixed a problem and found a solution in 3 days"
        # -2 length, +1 digit, +1 project, +1 problem-solving (capped)
        assert AnswerScorer.score_technical("q", answer) == 6

    def test_clamped_to_ten(self):
        answer = " ".join(["algorithm", "security", "example", "problem", "42"] + ["filler"] * 100)
        assert AnswerScorer.score_technical("q", answer) == 10

    @pytest.mark.parametrize("answer", [
        "",
        "x",
        words(500, "performance"),
        "maybe not sure I guess stuff things something perfect never",
    ])
    def test_always_in_range(self, answer):
        assert 0 <= AnswerScorer.score_technical("q", answer) <= 10


class TestCommunicationScore:
    def test_empty_answer_gets_base_scores(self):
        scores = AnswerScorer.score_communication("")
        assert (scores.clarity, scores.confidence, scores.honesty) == (5, 5, 5)
        assert AnswerScorer.score_behavioral("") == 5.0

    def test_structured_clear_answer(self):
        answer = ("First we measured. Then we fixed it. Finally we shipped. "
                  "Specifically because the logs showed it")
        assert AnswerScorer.score_clarity(answer) == 9

    def test_vague_words_reduce_clarity(self):
        assert AnswerScorer.score_clarity("something and stuff") == 3

    def test_structure_words_are_case_sensitive(self):
        assert AnswerScorer.score_clarity("first we looked at it") == 5

    def test_confidence(self):
        assert AnswerScorer.score_communication("I know the system and I led the migration.").confidence == 8
        assert AnswerScorer.score_communication("I'm not sure, I guess maybe").confidence == 2
        assert AnswerScorer.score_communication("i think so").confidence == 6

    def test_confidence_clamped(self):
        answer = "I believe I know I did I led"
        assert AnswerScorer.score_communication(answer).confidence == 10

    def test_honesty(self):
        assert AnswerScorer.score_communication("I made a mistake and learned to admit it").honesty == 9
        assert AnswerScorer.score_communication("It was perfect, the best ever").honesty == 3

    def test_behavioral_score_is_mean_of_dimensions(self):
        answer = "I made a mistake and learned to admit it"
        scores = AnswerScorer.score_communication(answer)
        expected = (scores.clarity + scores.confidence + scores.honesty) / 3
        assert AnswerScorer.score_behavioral(answer) == expected

    @pytest.mark.parametrize("answer", [
        "",
        "not sure I guess maybe perhaps perfect always never best something stuff",
        "First Then Finally. a. b. c. specifically because I know I'm confident I did I led "
        "mistake learned admit",
    ])
    def test_dimensions_in_range(self, answer):
        scores = AnswerScorer.score_communication(answer)
        for value in (scores.clarity, scores.confidence, scores.honesty):
            assert 0 <= value <= 10


def test_mean():
    assert AnswerScorer.mean([7, 6]) == 6.5
    assert AnswerScorer.mean([]) == 0.0
