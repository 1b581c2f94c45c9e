import unittest

from core.models import Question, Quiz, RawOption, RawQuestion
from core.validation import validate_quiz, validate_raw_questions


def _options(n, correct=0, explanation="Because it is right"):
    return [
        RawOption(
            id=i + 1,
            text=f"Option {i + 1}",
            is_correct=(i == correct),
            explanation=explanation if i == correct else "",
        )
        for i in range(n)
    ]


def _raw(n_options=4, **overrides):
    fields = {"id": 1, "text": "What is it?", "options": _options(n_options)}
    fields.update(overrides)
    return RawQuestion(**fields)


def _quiz(**overrides):
    question = Question(
        id="q_1",
        question="What is it?",
        options=("A", "B"),
        correct_answer=1,
        explanation="B is right",
    )
    fields = {"id": "quiz_ai_1", "title": "AI Quiz: Course", "course_id": "c1", "questions": (question,)}
    fields.update(overrides)
    return Quiz(**fields)


def _question(**overrides):
    fields = {
        "id": "q_1",
        "question": "What is it?",
        "options": ("A", "B"),
        "correct_answer": 0,
        "explanation": "A is right",
    }
    fields.update(overrides)
    return Question(**fields)


class TestValidateRawQuestions(unittest.TestCase):
    def test_valid_question(self):
        result = validate_raw_questions([_raw()])
        self.assertTrue(result.is_valid)
        self.assertEqual(result.errors, [])

    def test_empty_list_short_circuits(self):
        result = validate_raw_questions([])
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["No questions were generated"])

    def test_option_count_boundaries(self):
        one = validate_raw_questions([_raw(1)])
        self.assertFalse(one.is_valid)
        self.assertIn("Question 1: Question must have at least 2 options (has 1)", one.errors)

        eleven = validate_raw_questions([_raw(11)])
        self.assertFalse(eleven.is_valid)
        self.assertIn("Question 1: Question has too many options (11), maximum is 10", eleven.errors)

        self.assertTrue(validate_raw_questions([_raw(2)]).is_valid)
        self.assertTrue(validate_raw_questions([_raw(10)]).is_valid)

    def test_question_fields(self):
        result = validate_raw_questions([_raw(id=0, text="  ", options=None)])
        self.assertEqual(
            result.errors,
            [
                "Question 1: Missing question id",
                "Question 1: Missing question text",
                "Question 1: Missing options array",
            ],
        )

    def test_option_fields_use_one_based_indexes(self):
        options = _options(3)
        options[2] = RawOption(id=None, text="", is_correct="no", explanation="")
        result = validate_raw_questions([_raw(), _raw(options=options)])
        self.assertEqual(
            result.errors,
            [
                "Question 2, Option 3: Missing option id",
                "Question 2, Option 3: Missing option text",
                "Question 2, Option 3: isCorrect must be a boolean",
            ],
        )

    def test_no_correct_answer(self):
        options = _options(3)
        options[0].is_correct = False
        result = validate_raw_questions([_raw(options=options)])
        self.assertEqual(
            result.errors,
            ["Question 1: No correct answer specified (all options marked as false)"],
        )

    def test_multiple_correct_answers(self):
        options = _options(3)
        options[1].is_correct = True
        options[2].is_correct = True
        result = validate_raw_questions([_raw(options=options)])
        self.assertEqual(
            result.errors,
            ["Question 1: Multiple correct answers specified (3), only one allowed"],
        )

    def test_correct_answer_needs_explanation(self):
        result = validate_raw_questions([_raw(options=_options(2, explanation=""))])
        self.assertEqual(result.errors, ["Question 1: Correct answer missing explanation"])

    def test_all_errors_are_collected(self):
        bad_count = _raw(1)
        no_text = _raw(text="")
        result = validate_raw_questions([bad_count, _raw(), no_text])
        self.assertEqual(
            result.errors,
            [
                "Question 1: Question must have at least 2 options (has 1)",
                "Question 3: Missing question text",
            ],
        )


class TestValidateQuiz(unittest.TestCase):
    def test_valid_quiz(self):
        self.assertTrue(validate_quiz(_quiz()).is_valid)

    def test_quiz_fields(self):
        result = validate_quiz(_quiz(id="", title="", course_id="", questions=()))
        self.assertEqual(
            result.errors,
            [
                "Quiz id is required",
                "Quiz title is required",
                "Quiz courseId is required",
                "Quiz must contain at least one question",
            ],
        )

    def test_correct_answer_bounds(self):
        for answer in (-1, 2):
            with self.subTest(answer=answer):
                result = validate_quiz(_quiz(questions=(_question(correct_answer=answer),)))
                self.assertFalse(result.is_valid)
                self.assertIn("out of range", result.errors[0])

    def test_correct_answer_must_be_a_number(self):
        for answer in ("1", True, None):
            with self.subTest(answer=answer):
                result = validate_quiz(_quiz(questions=(_question(correct_answer=answer),)))
                self.assertEqual(result.errors, ["Question 1: correctAnswer must be a number"])

    def test_question_content(self):
        result = validate_quiz(_quiz(questions=(_question(question="", options=("A",), explanation=""),)))
        self.assertEqual(
            result.errors,
            [
                "Question 1: Question text is required",
                "Question 1: Question must have at least 2 options",
                "Question 1: Explanation is required",
            ],
        )

    def test_blank_option_text(self):
        result = validate_quiz(_quiz(questions=(_question(options=("A", " ")),)))
        self.assertEqual(result.errors, ["Question 1, Option 2: Option text must be a non-empty string"])


if __name__ == "__main__":
    unittest.main()
