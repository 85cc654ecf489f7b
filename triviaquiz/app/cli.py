from __future__ import annotations

"""CLI for Trivia Quiz: console quiz loop, bank check and GUI launcher."""

import argparse
import sys
from typing import Any, Callable, Dict

from .. import __version__
from ..bank.loader import load_file, load_resource
from ..bank.models import QuestionBank
from ..config.config import load_config, validate_config
from ..config.settings import QuizSettings, settings_from_config
from ..engine.session import EmptyBankError, Phase, QuizSession
from ..engine.summary import format_score
from ..util.randomness import make_rng
from ..util.events import ANSWER_GRADED, EventBus


def load_bank(settings: QuizSettings, log: Callable[[str], None] | None = None) -> QuestionBank:
    """Load the configured bank, or the packaged sample when none is set."""
    if settings.question_file:
        return load_file(settings.question_file, settings.max_questions, log, encoding=settings.encoding)
    return load_resource(settings.max_questions, log)


def _build_ui() -> Dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def run_console(session: QuizSession, ui: Dict[str, Callable[..., Any]]) -> int:
    """Drive one or more sessions from a line-oriented UI.

    ``ui["ask"]`` returns a line of input and raises EOFError when input ends;
    ``ui["inform"]`` displays a message. Returns a process exit status.
    """
    ask = ui["ask"]
    inform = ui["inform"]

    while True:
        try:
            session.start()
        except EmptyBankError as e:
            inform(str(e))
            return 1

        while session.phase is Phase.RUNNING:
            inform(f"Q{session.cursor + 1}/{session.total}: {session.current_question()}")
            try:
                answer = ask("> ")
            except EOFError:
                inform("\nQuiz abandoned.")
                return 0
            session.tick()
            result = session.submit_answer(answer)
            if result is None:
                break
            inform("Correct!" if result.correct else "Incorrect.")
            inform(format_score(result.score, result.total))

        inform("")
        inform(session.current_question())

        try:
            again = ask("Play again? [y/N] ")
        except EOFError:
            return 0
        if again.strip().lower() not in ("y", "yes"):
            return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="trivia-quiz")
    p.add_argument("--version", action="version", version=f"trivia-quiz {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--config", default=None, help="Path to YAML config")
        sp.add_argument("--questions-file", dest="questions_file", default=None, help="PROMPT|ANSWER text file")
        sp.add_argument("--max-questions", dest="max_questions", type=int, default=None)
        sp.add_argument("--explain", action="store_true", help="Print trace lines at session milestones")

    rp = sub.add_parser("run", help="Play a quiz in the terminal")
    add_common(rp)
    rp.add_argument("--seed", type=int, default=None, help="Seed for question order (overrides SEED)")

    cp = sub.add_parser("check", help="Validate a question file and list accepted prompts")
    add_common(cp)

    gp = sub.add_parser("gui", help="Open the Tkinter window")
    add_common(gp)
    gp.add_argument("--seed", type=int, default=None)

    args = p.parse_args(argv)

    if args.explain:
        from ..util.explain import enable as explain_enable
        explain_enable(True)

    cfg = validate_config(load_config(args.config))
    if args.questions_file is not None:
        cfg["quiz"]["question_file"] = args.questions_file
    if args.max_questions is not None:
        cfg["quiz"]["max_questions"] = args.max_questions
        cfg = validate_config(cfg)
    settings = settings_from_config(cfg)

    if args.cmd == "check":
        bank = load_bank(settings)
        print(f"Loaded {len(bank)} valid questions (max {settings.max_questions}).")
        for i, rec in enumerate(bank, start=1):
            print(f"{i:>3}. {rec.prompt}")
        return 0 if len(bank) else 1

    if args.cmd == "run":
        bank = load_bank(settings)
        bus = EventBus()
        session = QuizSession(bank, rng=make_rng(args.seed), bus=bus)
        if args.explain:
            from ..util.explain import trace as xtrace
            bus.subscribe(ANSWER_GRADED, lambda snap: xtrace("snapshot", {"phase": snap.phase.value, "score": snap.score, "cursor": snap.cursor}))
        return run_console(session, _build_ui())

    if args.cmd == "gui":
        from .gui import main as gui_main
        return gui_main(settings, seed=args.seed)

    return 0


if __name__ == "__main__":
    sys.exit(main())
