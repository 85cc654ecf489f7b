import unittest

from triviaquiz.bank.models import QuestionRecord
from triviaquiz.engine.grading import grade, normalize
from triviaquiz.engine.summary import PERFECT_MESSAGE, format_missed, format_score, format_summary


class GradingTests(unittest.TestCase):
    def test_normalize(self) -> None:
        self.assertEqual(normalize("  HeLLo \t"), "hello")
        self.assertEqual(normalize(""), "")

    def test_grade(self) -> None:
        self.assertTrue(grade(" paris", "Paris "))
        self.assertFalse(grade("Pari", "Paris"))


class SummaryTests(unittest.TestCase):
    def test_score_line(self) -> None:
        self.assertEqual(format_score(3, 10), "Score: 3/10")

    def test_missed_list_in_order(self) -> None:
        text = format_missed([QuestionRecord("Q1", "A1"), QuestionRecord("Q2", "A2")])
        self.assertTrue(text.startswith("Missed Questions:"))
        self.assertLess(text.index("Q: Q1"), text.index("Q: Q2"))
        self.assertIn("A: A2", text)

    def test_no_missed_gives_congratulation(self) -> None:
        self.assertEqual(format_missed([]), PERFECT_MESSAGE)

    def test_summary_has_score_time_and_items(self) -> None:
        text = format_summary(1, 2, 17, [QuestionRecord("Capital of France", "Paris")])
        lines = text.splitlines()
        self.assertEqual(lines[0], "Quiz Over! Your score: 1/2")
        self.assertEqual(lines[1], "Time: 17")
        self.assertIn("Q: Capital of France", lines)
        self.assertIn("A: Paris", lines)


if __name__ == "__main__":
    unittest.main()
