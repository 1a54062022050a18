"""curses front end: draws the game and maps keys to loop actions."""

import curses
from typing import Optional, Tuple

from letterbank.services.game import GameLoop, KeyAction, describe

INPUT_BOX = [
    "        type a word         ",
    "|==========================|",
    "|                          |",
    "|==========================|",
    " [Tab] clear [Enter] accept ",
]

TILE = [
    "/----\\",
    "|    |",
    "|    |",
    "\\----/",
]


def map_key(key: int) -> Tuple[KeyAction, Optional[str]]:
    if key == curses.KEY_F4:
        return KeyAction.QUIT, None
    if 0x41 <= key <= 0x5A or 0x61 <= key <= 0x7A:
        return KeyAction.APPEND, chr(key).upper()
    if key in (0x7F, 0x08, curses.KEY_BACKSPACE):
        return KeyAction.BACKSPACE, None
    if key in (0x09, curses.KEY_BTAB):
        return KeyAction.CLEAR, None
    if key in (0x0A, 0x0D, curses.KEY_ENTER):
        return KeyAction.ACCEPT, None
    return KeyAction.NONE, None


def _addstr(win, y: int, x: int, text: str) -> None:
    """addstr that ignores curses errors at screen edges."""
    try:
        win.addstr(max(0, y), max(0, x), text)
    except curses.error:
        pass


class TerminalView:
    def __init__(self, stdscr, loop: GameLoop, port: int = 8000):
        self.stdscr = stdscr
        self.loop = loop
        self.port = port
        self.word_pos = (0, 0)

    def draw(self) -> None:
        win = self.stdscr
        win.erase()
        height, width = win.getmaxyx()
        state = self.loop.state

        _addstr(win, 0, 0, " [F4] quit")
        score = f"| score {state.score:6} |"
        _addstr(win, 0, width - len(score) - 4, score)

        y = 2
        x = (width - len(INPUT_BOX[0])) // 2
        self.word_pos = (y + 2, x + 2)
        for line in INPUT_BOX:
            _addstr(win, y, x, line)
            y += 1

        message = describe(self.loop.last_quality, state.min_word_length)
        y += 1
        _addstr(win, y, (width - len(message)) // 2, message)

        y = self._draw_bank(y + 3, width)
        self._draw_viewer_instructions(y + 2, width)

        _addstr(win, self.word_pos[0], self.word_pos[1], state.word)
        win.refresh()

    def _draw_bank(self, y: int, width: int) -> int:
        tile_w = len(TILE[0]) + 4
        per_row = max(1, (width - 20) // tile_w)
        for i, letter in enumerate(self.loop.state.bank):
            row, col = divmod(i, per_row)
            top = y + row * 5
            left = (14 if row % 2 == 0 else 10) + col * tile_w
            for offset, line in enumerate(TILE):
                _addstr(self.stdscr, top + offset, left, line)
            _addstr(self.stdscr, top + 1, left + 2, letter.char)
            _addstr(self.stdscr, top + 2, left + 1, f"{letter.points:4}")
        rows = (len(self.loop.state.bank) + per_row - 1) // per_row
        return y + rows * 5

    def _draw_viewer_instructions(self, y: int, width: int) -> None:
        lines = [
            "for viewers:",
            "to swap letters in the bank, type this into your browser:",
            f"http://<server address>:{self.port}/replace/<what>/with/<what>",
            "for example:",
            f"http://127.0.0.1:{self.port}/replace/a/with/z",
        ]
        for line in lines:
            _addstr(self.stdscr, y, (width - len(line)) // 2, line)
            y += 1


def run_terminal(loop: GameLoop, tick_ms: int = 16, port: int = 8000) -> None:
    """Run the render/input loop until the player quits."""

    def _main(stdscr):
        curses.cbreak()
        curses.noecho()
        stdscr.keypad(True)
        stdscr.timeout(tick_ms)
        view = TerminalView(stdscr, loop, port=port)
        while True:
            # getch waits at most tick_ms, which paces the loop
            action, char = map_key(stdscr.getch())
            if loop.tick(action, char):
                break
            view.draw()

    curses.wrapper(_main)
