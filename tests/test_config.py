import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

from pydantic import ValidationError

from triviaquiz.config.config import load_config, validate_config
from triviaquiz.config.settings import QuizSettings, settings_from_config


class ConfigTests(unittest.TestCase):
    def test_packaged_defaults(self) -> None:
        cfg = validate_config(load_config(None))
        self.assertIsNone(cfg["quiz"]["question_file"])
        self.assertEqual(cfg["quiz"]["max_questions"], 10)
        self.assertEqual(cfg["timer"]["tick_interval_ms"], 200)

    def test_missing_sections_get_defaults(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg["quiz"]["max_questions"], 10)
        self.assertEqual(cfg["quiz"]["encoding"], "utf-8")
        self.assertEqual(cfg["ui"]["title"], "Trivia Quiz")

    def test_bad_values_fall_back_with_warning(self) -> None:
        buf = StringIO()
        with redirect_stdout(buf):
            cfg = validate_config({"quiz": {"max_questions": 0}, "timer": {"tick_interval_ms": "fast"}})
        self.assertEqual(cfg["quiz"]["max_questions"], 10)
        self.assertEqual(cfg["timer"]["tick_interval_ms"], 200)
        self.assertIn("WARNING", buf.getvalue())

    def test_unknown_encoding_falls_back_to_utf8(self) -> None:
        buf = StringIO()
        with redirect_stdout(buf):
            cfg = validate_config({"quiz": {"encoding": "latin-2x"}})
        self.assertEqual(cfg["quiz"]["encoding"], "utf-8")
        self.assertIn("WARNING: Unknown encoding 'latin-2x'", buf.getvalue())

    def test_known_encoding_is_kept(self) -> None:
        cfg = validate_config({"quiz": {"encoding": "latin-1"}})
        self.assertEqual(cfg["quiz"]["encoding"], "latin-1")

    def test_non_string_question_file_is_coerced(self) -> None:
        cfg = validate_config({"quiz": {"question_file": 123}})
        self.assertEqual(cfg["quiz"]["question_file"], "123")

    def test_yaml_file_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "cfg.yml"
            p.write_text("quiz:\n  max_questions: 3\n  question_file: my.txt\n", encoding="utf-8")
            cfg = validate_config(load_config(str(p)))
        self.assertEqual(cfg["quiz"]["max_questions"], 3)
        self.assertEqual(cfg["quiz"]["question_file"], "my.txt")

    def test_missing_config_file_exits(self) -> None:
        with self.assertRaises(SystemExit):
            load_config("/definitely/not/here.yml")


class SettingsTests(unittest.TestCase):
    def test_from_validated_config(self) -> None:
        cfg = validate_config({"quiz": {"max_questions": 5}, "ui": {"title": "Pub Quiz"}})
        s = settings_from_config(cfg)
        self.assertEqual(s.max_questions, 5)
        self.assertEqual(s.title, "Pub Quiz")
        self.assertIsNone(s.question_file)

    def test_non_string_question_file_in_raw_dict(self) -> None:
        s = settings_from_config({"quiz": {"question_file": 123}})
        self.assertEqual(s.question_file, "123")

    def test_constraints(self) -> None:
        with self.assertRaises(ValidationError):
            QuizSettings(max_questions=0)
        with self.assertRaises(ValidationError):
            QuizSettings(tick_interval_ms=-5)


if __name__ == "__main__":
    unittest.main()
