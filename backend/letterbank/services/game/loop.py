from enum import Enum, auto
from typing import Optional

from letterbank.channel import CommandReceiver
from .appraisal import WordQuality
from .state import GameState


class KeyAction(Enum):
    NONE = auto()
    APPEND = auto()
    BACKSPACE = auto()
    CLEAR = auto()
    ACCEPT = auto()
    QUIT = auto()


class GameLoop:
    """One tick: apply at most one viewer command, then one key action."""

    def __init__(self, state: GameState, receiver: CommandReceiver):
        self.state = state
        self.receiver = receiver
        self.last_quality: WordQuality = state.appraise()

    def process_commands(self) -> bool:
        command = self.receiver.try_receive()
        if command is None:
            return False
        return self.state.apply_command(command)

    def handle(self, action: KeyAction, char: Optional[str] = None) -> bool:
        """Apply a key action. Returns True when the player quits."""
        if action is KeyAction.QUIT:
            return True
        if action is KeyAction.APPEND and char:
            self.state.append_letter(char)
        elif action is KeyAction.BACKSPACE:
            self.state.backspace()
        elif action is KeyAction.CLEAR:
            self.state.clear_word()
        elif action is KeyAction.ACCEPT:
            self.state.accept_word()
        return False

    def tick(self, action: KeyAction = KeyAction.NONE, char: Optional[str] = None) -> bool:
        self.process_commands()
        quit_requested = self.handle(action, char)
        self.last_quality = self.state.appraise()
        return quit_requested
