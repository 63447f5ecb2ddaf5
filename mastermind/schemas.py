"""
Pydantic read models.
- A presentation layer can render or serialize these without touching
  the live session.
- The secret is only filled in once the game is over.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .types import GameStatus


# 1. Feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[int] = Field(..., description="The player's guess")
    exact_matches: int = Field(..., description="Digits in the correct position")
    partial_matches: int = Field(..., description="Digits present elsewhere in the secret")
    guesses_remaining: int = Field(..., description="Guesses left right after this one")
    is_win: bool = Field(..., description="True if this guess cracked the code")


# 2. Overall state of the session
class SessionState(BaseModel):
    status: GameStatus = Field(..., description="Current state of the game")
    digit_count: int = Field(..., description="Digits per code")
    digit_max_value: int = Field(..., description="Highest allowed digit")
    max_guesses: int = Field(..., description="Attempt limit")
    guess_count: int = Field(..., description="Guesses made so far")
    guesses_remaining: int = Field(..., description="How many guesses remain")
    history: List[Optional[GuessEntryOut]] = Field(
        ..., description="One slot per allowed guess; unused slots are null"
    )
    secret: Optional[List[int]] = Field(None, description="The secret code (only revealed if game is over)")
