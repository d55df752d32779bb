import curses
import io

import pytest

from life_curses.core import LifeBoard, RandomSource
from life_curses.utils.rendering import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    CursesSink,
    RenderSink,
    TextSink,
)


class FakeWindow:
    """Stands in for a curses window."""

    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.lines = {}
        self.cursor = None
        self.refreshes = 0

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, row, col, text):
        self.lines[row] = text
        if row == self.height - 1 and len(text) == self.width:
            raise curses.error("addwstr() returned ERR")

    def move(self, row, col):
        self.cursor = (row, col)

    def refresh(self):
        self.refreshes += 1


def blinker_board():
    board = LifeBoard(3, 3, rng=RandomSource(0), randomize=False)
    for row in range(3):
        board.set(1, row, True)
    return board


def test_base_sink_is_abstract():
    sink = RenderSink()
    with pytest.raises(NotImplementedError):
        sink.write_row(0, "")
    with pytest.raises(NotImplementedError):
        sink.reset_cursor()


def test_text_sink_writes_whole_frames():
    stream = io.StringIO()
    sink = TextSink(stream)
    board = blinker_board()

    board.render(sink)
    board.advance_generation()
    board.render(sink)

    first = CLEAR_SCREEN + CURSOR_HOME + " * \n * \n * \n"
    second = CURSOR_HOME + "   \n***\n   \n"
    assert stream.getvalue() == first + second
    assert sink.frames_written == 2


def test_text_sink_without_ansi():
    stream = io.StringIO()
    blinker_board().render(TextSink(stream, ansi=False))
    assert stream.getvalue() == " * \n * \n * \n"


def test_curses_sink_paints_rows_and_homes_cursor():
    window = FakeWindow(3, 3)
    sink = CursesSink(window)
    board = blinker_board()
    board.advance_generation()

    board.render(sink)

    assert window.lines == {0: "   ", 1: "***", 2: "   "}
    assert window.cursor == (0, 0)
    assert window.refreshes == 1


def test_curses_sink_clips_to_window():
    window = FakeWindow(2, 2)
    sink = CursesSink(window)
    blinker_board().render(sink)
    assert window.lines == {0: " *", 1: " *"}
