"""Window that shows a fractal and reacts to the keyboard and mouse wheel."""

from __future__ import annotations

import sys
import tkinter as tk
from typing import Any, List, Optional, Sequence

from fractol.arguments import ArgumentError, parse_arguments
from fractol.fractal import SCROLL_DOWN, SCROLL_UP, Fractal
from fractol.printf import printf

_ESCAPE_KEYSYM = "Escape"


def _photo_data(rows: List[List[int]]) -> str:
    """Encode rows of 0xRRGGBB colours in the form PhotoImage.put accepts."""
    return " ".join(
        "{" + " ".join(f"#{color:06x}" for color in row) + "}" for row in rows
    )


class Viewer:
    """Displays a fractal in a Tk window."""

    def __init__(self, fractal: Fractal, root: Any) -> None:
        self.fractal = fractal
        self.root = root
        self.closed = False
        self.image = tk.PhotoImage(
            master=root, width=fractal.width, height=fractal.height
        )
        self.label = tk.Label(root, image=self.image, borderwidth=0)
        self.label.pack()
        root.title(fractal.name)
        root.protocol("WM_DELETE_WINDOW", self.close)
        root.bind("<Key>", self.on_key)
        root.bind("<ButtonPress>", self.on_scroll)
        root.bind("<MouseWheel>", self.on_scroll)

    def redraw(self) -> None:
        """Render the fractal and copy it into the window image."""
        self.image.put(_photo_data(self.fractal.render()), to=(0, 0))

    def on_key(self, event: Any) -> None:
        """Close the window on Escape."""
        if getattr(event, "keysym", None) == _ESCAPE_KEYSYM:
            self.close()

    def on_scroll(self, event: Any) -> None:
        """Zoom on wheel movement, then redraw; other buttons only redraw."""
        num = getattr(event, "num", None)
        delta = getattr(event, "delta", 0) or 0
        if num in (SCROLL_UP, SCROLL_DOWN):
            button = num
        elif delta > 0:
            button = SCROLL_UP
        elif delta < 0:
            button = SCROLL_DOWN
        else:
            button = num
        self.fractal.handle_scroll(button)
        self.redraw()

    def close(self) -> None:
        """Destroy the window, ending the event loop."""
        if self.closed:
            return
        self.closed = True
        self.root.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, open the window and run until it is closed."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        fractal = parse_arguments(args)
    except ArgumentError as error:
        printf("%s", str(error))
        return 1
    try:
        root = tk.Tk()
    except tk.TclError as error:
        printf("%s\n", f"cannot open a window: {error}")
        return 1
    viewer = Viewer(fractal, root)
    viewer.redraw()
    root.mainloop()
    return 0