"""Small window for running a random surf and showing the page ranking."""

from __future__ import annotations

import random

from randomsurfer.surfer import Surfer

DESCRIPTION = "Random Surfing Algorithm using Random visits per Page"


class SurferController:
    """Turns the form's text fields into a surf and keeps the last surfer."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.surfer: Surfer | None = None

    def surf(self, pages: str, visitors: str, damping_factor: str) -> str:
        """Run a surf with the given field values and return its log."""
        if not pages or not visitors or not damping_factor:
            raise ValueError("Fill all the blanks")
        page_count = int(pages)
        visitor_count = int(visitors)
        damping = float(damping_factor)
        self.surfer = Surfer(page_count, self._rng)
        return self.surfer.surf(visitor_count, damping)

    def ranking(self) -> str:
        """Return the ranking of the last surf."""
        if self.surfer is None:
            raise RuntimeError("No Web Surfing made!! \n Please make a web Surf")
        return self.surfer.find_ranking()


class SurferWindow:
    """The form with page, damping factor and visitor fields and the log view."""

    def __init__(self, root, controller: SurferController | None = None) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.controller = controller if controller is not None else SurferController()
        root.title("Random Surfer")
        root.geometry("350x500")
        root.configure(background="#ffccff")

        tk.Label(root, text=DESCRIPTION, foreground="#ff0055", background="#ffccff").pack(pady=3)
        self.pages = self._field("PAGES", "10")
        self.damping_factor = self._field("DAMPING FACTOR", "0.85")
        self.visitors = self._field("VISITORS", "3")

        buttons = tk.Frame(root, background="#ffb3ff")
        buttons.pack(fill=tk.X)
        tk.Button(buttons, text="SURFING", command=self.on_surfing).pack(side=tk.LEFT, padx=4, pady=4)
        tk.Button(buttons, text="RANKING", command=self.on_ranking).pack(side=tk.LEFT, padx=4, pady=4)

        self.results = tk.Text(root, width=44, height=18)
        self.results.pack(fill=tk.BOTH, expand=True)

    def _field(self, label: str, default: str):
        tk = self._tk
        frame = tk.Frame(self.root, background="#ffb3ff")
        frame.pack(fill=tk.X)
        tk.Label(frame, text=label, width=16, anchor="w", background="#ffb3ff").pack(side=tk.LEFT)
        entry = tk.Entry(frame, width=20)
        entry.insert(0, default)
        entry.pack(side=tk.LEFT, padx=4, pady=2)
        return entry

    def on_surfing(self) -> None:
        """Run a surf from the form and show its log."""
        from tkinter import messagebox

        try:
            log = self.controller.surf(
                self.pages.get(), self.visitors.get(), self.damping_factor.get()
            )
        except ValueError as exc:
            messagebox.showinfo(message=str(exc))
            return
        self.results.delete("1.0", self._tk.END)
        self.results.insert("1.0", log)

    def on_ranking(self) -> None:
        """Show the ranking of the last surf."""
        from tkinter import messagebox

        try:
            text = self.controller.ranking()
        except RuntimeError as exc:
            messagebox.showinfo(message=str(exc))
            return
        messagebox.showinfo("Ranking", text)


def main(argv: list[str] | None = None) -> int:
    """Open the surfer window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    SurferWindow(root)
    root.mainloop()
    return 0