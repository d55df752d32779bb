"""
Render sinks for board frames.

A sink receives a full frame as rows written at their row offsets,
followed by a cursor reset. Every frame overwrites the previous one.
"""
import curses
import sys
from typing import List, Optional, TextIO

CURSOR_HOME = '\033[H'
CLEAR_SCREEN = '\033[2J'


class RenderSink:
    """Destination for rendered frames."""

    def write_row(self, row: int, text: str) -> None:
        raise NotImplementedError

    def reset_cursor(self) -> None:
        raise NotImplementedError


class TextSink(RenderSink):
    """
    Writes frames to a text stream.

    Rows are buffered until the cursor reset, then the whole frame is
    written at once, preceded by an ANSI cursor-home sequence so the next
    frame paints over this one on a terminal.
    """

    def __init__(self, stream: Optional[TextIO] = None, ansi: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.ansi = ansi
        self._rows: List[str] = []
        self.frames_written = 0

    def write_row(self, row: int, text: str) -> None:
        if row >= len(self._rows):
            self._rows.extend([''] * (row + 1 - len(self._rows)))
        self._rows[row] = text

    def reset_cursor(self) -> None:
        if self.ansi:
            prefix = CLEAR_SCREEN + CURSOR_HOME if self.frames_written == 0 else CURSOR_HOME
        else:
            prefix = ''
        self.stream.write(prefix + '\n'.join(self._rows) + '\n')
        self.stream.flush()
        self._rows = []
        self.frames_written += 1


class CursesSink(RenderSink):
    """Paints frames into a curses window."""

    def __init__(self, window):
        self.window = window

    def write_row(self, row: int, text: str) -> None:
        height, width = self.window.getmaxyx()
        if row >= height:
            return
        try:
            self.window.addstr(row, 0, text[:width])
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the window.
            pass

    def reset_cursor(self) -> None:
        self.window.move(0, 0)
        self.window.refresh()
