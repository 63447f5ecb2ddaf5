"""
Text-mode front end.
Reads one guess per line, prints the hint as '+' per exact match and '-'
per partial match, and reveals the secret when the game ends.

All rules live in the session; this module only turns text into guesses
and session errors into messages.
"""

import logging
from typing import Callable, Sequence

from .errors import InvalidDigit, InvalidLength, SessionEnded
from .session import Session
from .types import GameStatus

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"


def format_hint(exact_matches: int, partial_matches: int) -> str:
    return "+" * exact_matches + "-" * partial_matches


def secret_text(digits: Sequence[int]) -> str:
    return "".join(str(d) for d in digits)


class ConsoleGame:
    def __init__(
        self,
        session: Session,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.session = session
        self._read = read
        self._write = write

    def play(self) -> GameStatus:
        """
        Run until the game ends, the player types 'quit', or input runs out.
        Returns the session status at that point.
        """
        session = self.session
        self._write("Welcome to Console Mastermind!")
        self._write("")
        self._write(f"Type a {session.digit_count}-digit number and press Enter/Return to submit a guess.")
        self._write(f"Digits go from 1 to {session.digit_max_value}. Each guess will result in a hint.")
        self._write(f"You win if you are able to guess the hidden number within {session.guesses_remaining} guesses.")
        self._write("")
        self._write(f"Good luck! (Enter '{QUIT_COMMAND}' at any time to exit)")
        self._write("")

        while self._handle_input():
            pass

        # Quitting early does not give the answer away
        if session.is_over:
            if session.is_won:
                self._write("You win! You correctly guessed the number: " + secret_text(session.reveal_secret()))
            else:
                self._write("You lose - the number was: " + secret_text(session.reveal_secret()))
            self._write("")
            self._write("Thank you for playing.")

        return session.status

    def _handle_input(self) -> bool:
        """Returns False once the loop should stop."""
        try:
            text = self._read("Your Guess: ")
        except EOFError:
            logger.debug("Input closed; leaving the game")
            return False
        return self.process_input(text)

    def process_input(self, text: str) -> bool:
        session = self.session
        text = text.strip()

        if text.lower() == QUIT_COMMAND:
            return False

        if len(text) != session.digit_count or not all(c in "0123456789" for c in text):
            self._write(f"You must enter a {session.digit_count}-digit number!")
            return True

        try:
            result = session.guess([int(c) for c in text])
        except InvalidDigit:
            self._write(f"All digits must be between 1 and {session.digit_max_value}!")
            return True
        except InvalidLength:
            self._write(f"You must enter a {session.digit_count}-digit number!")
            return True
        except SessionEnded:
            return False

        if not result.is_win:
            self._write(format_hint(result.exact_matches, result.partial_matches))
            self._write("")
            self._write(f"You have {result.guesses_remaining} guesses remaining.")

        return not session.is_over
