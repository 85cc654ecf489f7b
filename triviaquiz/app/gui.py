from __future__ import annotations

"""Very simple Tkinter GUI for a quiz session.

Shows the timer, the current question, an answer entry, Submit/Start buttons,
the running score and, once finished, the missed questions. All logic lives
in :class:`~triviaquiz.engine.session.QuizSession`; this window renders its
snapshots and drives ``tick`` from an ``after()`` loop.
"""

import tkinter as tk
from tkinter import ttk

from ..config.config import load_config, validate_config
from ..config.settings import QuizSettings, settings_from_config
from ..engine.session import EmptyBankError, Phase, QuizSession, SessionSnapshot
from ..engine.summary import format_missed, format_score
from ..util.randomness import make_rng
from .cli import load_bank
from ..util.events import ANSWER_GRADED, SESSION_FINISHED, SESSION_STARTED, EventBus


class App(tk.Tk):
    def __init__(self, settings: QuizSettings, seed: int | None = None) -> None:
        super().__init__()
        self.settings = settings
        self.title(settings.title)
        self.geometry(f"{settings.width}x{settings.height}")

        # Loader diagnostics go to the console box shown after a failed start
        self._diagnostics: list[str] = []
        bank = load_bank(settings, log=self._diagnostics.append)

        self.bus = EventBus()
        self.bus.subscribe(SESSION_STARTED, self._render)
        self.bus.subscribe(ANSWER_GRADED, self._render)
        self.bus.subscribe(SESSION_FINISHED, self._render)
        self.session = QuizSession(bank, rng=make_rng(seed), bus=self.bus)

        self.timer_var = tk.StringVar(value="Time: 0")
        self.question_var = tk.StringVar(value=self.session.current_question())
        self.score_var = tk.StringVar(value=format_score(0, self.session.total))

        self._after_id: str | None = None
        self._build_widgets()

    def _build_widgets(self) -> None:
        frm = ttk.Frame(self, padding=20)
        frm.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        ttk.Label(frm, textvariable=self.timer_var).pack(side=tk.TOP, pady=4)
        ttk.Label(frm, textvariable=self.question_var, wraplength=self.settings.width - 40, justify=tk.CENTER).pack(side=tk.TOP, pady=4)

        self.entry = ttk.Entry(frm)
        self.entry.pack(side=tk.TOP, fill=tk.X, pady=4)
        # Allow pressing Enter to submit
        self.entry.bind("<Return>", lambda _e: self._on_submit())

        self.submit_btn = ttk.Button(frm, text="Submit Answer", command=self._on_submit)
        self.submit_btn.pack(side=tk.TOP, pady=4)
        self.start_btn = ttk.Button(frm, text="Start Quiz", command=self.start_session)
        self.start_btn.pack(side=tk.TOP, pady=4)

        ttk.Label(frm, textvariable=self.score_var).pack(side=tk.TOP, pady=4)

        self.missed_text = tk.Text(frm, height=8, wrap=tk.WORD)
        self._missed_visible = False

        self._set_controls(running=False)

    def _set_controls(self, running: bool) -> None:
        self.submit_btn.configure(state=(tk.NORMAL if running else tk.DISABLED))
        self.entry.configure(state=(tk.NORMAL if running else tk.DISABLED))
        self.start_btn.configure(state=(tk.DISABLED if running else tk.NORMAL))

    def _show_missed(self, text: str | None) -> None:
        self.missed_text.configure(state=tk.NORMAL)
        self.missed_text.delete(1.0, tk.END)
        if text is None:
            if self._missed_visible:
                self.missed_text.pack_forget()
                self._missed_visible = False
            return
        self.missed_text.insert(tk.END, text)
        self.missed_text.configure(state=tk.DISABLED)
        if not self._missed_visible:
            self.missed_text.pack(side=tk.TOP, fill=tk.BOTH, expand=True, pady=4)
            self._missed_visible = True

    def _render(self, snap: SessionSnapshot) -> None:
        self.timer_var.set(f"Time: {snap.elapsed_seconds}")
        self.score_var.set(format_score(snap.score, snap.total))
        if snap.phase is Phase.FINISHED:
            self.question_var.set(f"Quiz Over! Your score: {snap.score}/{snap.total}")
            self._show_missed(f"Time: {snap.elapsed_seconds}\n{format_missed(snap.missed)}")
            self._set_controls(running=False)
            self._cancel_timer()
        else:
            self.question_var.set(snap.text)

    def start_session(self) -> None:
        try:
            self.session.start()
        except EmptyBankError as e:
            self.question_var.set(str(e))
            if self._diagnostics:
                self._show_missed("\n".join(self._diagnostics))
            return
        self.entry.configure(state=tk.NORMAL)
        self.entry.delete(0, tk.END)
        self._show_missed(None)
        self._set_controls(running=True)
        self.entry.focus_set()
        self._schedule_tick()

    def _on_submit(self) -> None:
        if self.session.phase is not Phase.RUNNING:
            return
        answer = self.entry.get()
        self.entry.delete(0, tk.END)
        self.session.tick()
        self.session.submit_answer(answer)

    def _schedule_tick(self) -> None:
        self._cancel_timer()
        self._after_id = self.after(self.settings.tick_interval_ms, self._on_tick)

    def _cancel_timer(self) -> None:
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None

    def _on_tick(self) -> None:
        self._after_id = None
        if self.session.phase is not Phase.RUNNING:
            return
        self.session.tick()
        self.timer_var.set(f"Time: {self.session.elapsed_seconds}")
        self._schedule_tick()


def main(settings: QuizSettings | None = None, seed: int | None = None) -> int:
    if settings is None:
        settings = settings_from_config(validate_config(load_config(None)))
    app = App(settings, seed=seed)
    app.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
