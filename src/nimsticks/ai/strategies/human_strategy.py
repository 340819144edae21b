"""
Human strategy and the input providers it reads moves from.
"""
from typing import Callable, Iterable, List, Optional, Protocol, Tuple

from .base import Strategy, StrategyInfo
from ...core.board import Board
from ...core.move import Move


MoveTriple = Tuple[int, int, int]


class InputProvider(Protocol):
    """Source of moves for a human player."""

    def request_display(self, board: Board) -> None:
        """Give the player a chance to look at the board."""
        ...

    def request_move(self) -> MoveTriple:
        """Return the (row, left, right) entered by the player."""
        ...


class ConsoleInputProvider:
    """
    Reads moves from the console.

    Before each move the player is offered a menu: 1 prints the board,
    2 goes on to enter the move.
    """

    DISPLAY = 1
    MOVE = 2

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def request_display(self, board: Board) -> None:
        while True:
            choice = self._read_int("Press 1 to display the board. Press 2 to make a move:")
            if choice == self.DISPLAY:
                self.output_fn(str(board))
            elif choice == self.MOVE:
                return
            else:
                self.output_fn("Unknown input.")

    def request_move(self) -> MoveTriple:
        row = self._read_int("Enter the row number:")
        left = self._read_int("Enter the index of the leftmost stick:")
        right = self._read_int("Enter the index of the rightmost stick:")
        return row, left, right

    def _read_int(self, prompt: str) -> int:
        self.output_fn(prompt)
        while True:
            raw = self.input_fn("")
            try:
                return int(raw.strip())
            except ValueError:
                self.output_fn("Please enter a whole number:")


class ScriptedInputProvider:
    """Replays a fixed sequence of moves, e.g. for tests or demos."""

    def __init__(self, moves: Iterable[MoveTriple]):
        self._moves = iter(list(moves))
        self.display_requests = 0
        self.boards_seen: List[str] = []

    def request_display(self, board: Board) -> None:
        self.display_requests += 1
        self.boards_seen.append(str(board))

    def request_move(self) -> MoveTriple:
        try:
            return next(self._moves)
        except StopIteration:
            raise RuntimeError("Scripted input exhausted") from None


class HumanStrategy(Strategy):
    """
    Forwards the decision to a person through an input provider.

    The entered move is passed on as-is; the board decides whether it is
    legal and the caller asks again if it is not.
    """

    INFO = StrategyInfo(
        id="human",
        name="Human",
        short_desc="Moves entered by a person",
        algorithm="Ask the input provider for a row and a stick range",
    )

    def __init__(self, input_provider: Optional[InputProvider] = None, seed: Optional[int] = None):
        super().__init__(seed=seed)
        if input_provider is None:
            raise ValueError("HumanStrategy needs an input provider")
        self.input_provider = input_provider

    def produce_move(self, board: Board) -> Move:
        self.input_provider.request_display(board)
        row, left, right = self.input_provider.request_move()
        return self._explain(Move(int(row), int(left), int(right)), "entered by player")
