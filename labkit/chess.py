"""Chess rules engine: movement, check, checkmate, stalemate, castling,
en passant and promotion."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from itertools import product

BOARD_SIZE = 8


class PieceType(Enum):
    NONE = 0
    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class Color(Enum):
    WHITE = 0
    BLACK = 1
    NO_COLOR = 2

    @property
    def opponent(self) -> Color:
        if self is Color.WHITE:
            return Color.BLACK
        if self is Color.BLACK:
            return Color.WHITE
        return Color.NO_COLOR


class GameStatus(Enum):
    ONGOING = 0
    WHITE_WON = 1
    BLACK_WON = 2
    DRAW = 3


@dataclass(frozen=True)
class Piece:
    """A piece on one square; the default value is an empty square."""

    type: PieceType = PieceType.NONE
    color: Color = Color.NO_COLOR
    has_moved: bool = False

    @property
    def is_empty(self) -> bool:
        return self.type is PieceType.NONE


EMPTY = Piece()

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_SQUARES = tuple(product(range(BOARD_SIZE), repeat=2))


def _empty_board() -> list[list[Piece]]:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _on_board(*coords: int) -> bool:
    return all(0 <= v < BOARD_SIZE for v in coords)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _path_clear(board, row: int, col: int, d_row: int, d_col: int) -> bool:
    """True if every square strictly between the two ends is empty."""
    steps = max(abs(d_row), abs(d_col))
    step_r, step_c = _sign(d_row), _sign(d_col)
    return all(
        board[row + i * step_r][col + i * step_c].is_empty for i in range(1, steps)
    )


def _attacks(board, row: int, col: int, piece: Piece, target_row: int, target_col: int) -> bool:
    d_row, d_col = target_row - row, target_col - col
    a_row, a_col = abs(d_row), abs(d_col)
    kind = piece.type
    if kind is PieceType.PAWN:
        forward = -1 if piece.color is Color.WHITE else 1
        return d_row == forward and a_col == 1
    if kind is PieceType.KNIGHT:
        return {a_row, a_col} == {1, 2}
    if kind is PieceType.KING:
        return a_row <= 1 and a_col <= 1
    straight = d_row == 0 or d_col == 0
    diagonal = a_row == a_col
    if kind is PieceType.BISHOP and diagonal:
        return _path_clear(board, row, col, d_row, d_col)
    if kind is PieceType.ROOK and straight:
        return _path_clear(board, row, col, d_row, d_col)
    if kind is PieceType.QUEEN and (straight or diagonal):
        return _path_clear(board, row, col, d_row, d_col)
    return False


def _square_attacked(board, by_color: Color, row: int, col: int) -> bool:
    return any(
        not board[r][c].is_empty
        and board[r][c].color is by_color
        and _attacks(board, r, c, board[r][c], row, col)
        for r, c in _SQUARES
    )


def _king_in_check(board, color: Color) -> bool:
    king = next(
        (
            (r, c)
            for r, c in _SQUARES
            if board[r][c].type is PieceType.KING and board[r][c].color is color
        ),
        None,
    )
    if king is None:
        return False
    return _square_attacked(board, color.opponent, *king)


@dataclass
class GameState:
    """Full state of a game; the default board is empty."""

    board: list[list[Piece]] = field(default_factory=_empty_board)
    turn: Color = Color.WHITE
    status: GameStatus = GameStatus.ONGOING
    game_over: bool = False
    selected: tuple[int, int] | None = None
    en_passant: tuple[int, int] | None = None
    message: str | None = None

    def piece_at(self, row: int, col: int) -> Piece:
        if not _on_board(row, col):
            raise IndexError(f"square ({row}, {col}) is off the board")
        return self.board[row][col]

    def is_in_check(self, color: Color) -> bool:
        """True if the king of ``color`` is attacked; False if it has no king."""
        return _king_in_check(self.board, color)

    def is_square_attacked(self, by_color: Color, row: int, col: int) -> bool:
        return _square_attacked(self.board, by_color, row, col)

    def has_any_legal_moves(self, color: Color) -> bool:
        if self.game_over:
            return False
        return any(
            self._candidate(color, r, c, rr, cc) is not None
            for r, c in _SQUARES
            if not self.board[r][c].is_empty and self.board[r][c].color is color
            for rr, cc in _SQUARES
        )

    def move_piece(self, src_row: int, src_col: int, dest_row: int, dest_col: int) -> bool:
        """Play a move for the side to move; return False if it is illegal."""
        if self.game_over:
            return False
        result = self._candidate(self.turn, src_row, src_col, dest_row, dest_col)
        if result is None:
            return False
        self.board, self.en_passant = result
        mover = self.turn
        opponent = mover.opponent
        self.turn = opponent
        self.selected = None

        in_check = self.is_in_check(opponent)
        has_moves = self.has_any_legal_moves(opponent)
        if in_check and not has_moves:
            white_won = mover is Color.WHITE
            self.status = GameStatus.WHITE_WON if white_won else GameStatus.BLACK_WON
            self.game_over = True
            self.message = f"Checkmate! {'White' if white_won else 'Black'} wins."
        elif not has_moves:
            self.status = GameStatus.DRAW
            self.game_over = True
            self.message = "Stalemate. It's a draw."
        else:
            self.status = GameStatus.ONGOING
            self.game_over = False
            self.message = "Check!" if in_check else None
        return True

    def _candidate(self, color, src_row, src_col, dest_row, dest_col):
        """Board and en passant target after the move, or None if it is illegal."""
        if not _on_board(src_row, src_col, dest_row, dest_col):
            return None
        board = self.board
        src = board[src_row][src_col]
        dest = board[dest_row][dest_col]
        if src.is_empty or src.color is not color:
            return None
        if not dest.is_empty and dest.color is src.color:
            return None
        if (src_row, src_col) == (dest_row, dest_col):
            return None

        opponent = color.opponent
        kind = src.type
        d_row, d_col = dest_row - src_row, dest_col - src_col
        valid = False
        castling = False

        if kind is PieceType.PAWN:
            forward = -1 if color is Color.WHITE else 1
            if d_col == 0:
                if d_row == forward and dest.is_empty:
                    valid = True
                if (
                    d_row == 2 * forward
                    and not src.has_moved
                    and dest.is_empty
                    and board[src_row + forward][src_col].is_empty
                ):
                    valid = True
            if abs(d_col) == 1 and d_row == forward:
                if not dest.is_empty and dest.color is opponent:
                    valid = True
                elif dest.is_empty and self.en_passant == (dest_row, dest_col):
                    valid = True
        elif kind is PieceType.KNIGHT:
            valid = {abs(d_row), abs(d_col)} == {1, 2}
        elif kind is PieceType.BISHOP and abs(d_row) == abs(d_col):
            valid = _path_clear(board, src_row, src_col, d_row, d_col)
        elif kind is PieceType.ROOK and (d_row == 0 or d_col == 0):
            valid = _path_clear(board, src_row, src_col, d_row, d_col)
        elif kind is PieceType.QUEEN and (
            d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)
        ):
            valid = _path_clear(board, src_row, src_col, d_row, d_col)
        elif kind is PieceType.KING:
            if (
                abs(d_col) == 2
                and d_row == 0
                and not src.has_moved
                and not _king_in_check(board, color)
            ):
                rook = board[src_row][7 if d_col == 2 else 0]
                if rook.type is PieceType.ROOK and rook.color is color and not rook.has_moved:
                    step = _sign(d_col)
                    path_clear = all(
                        board[src_row][src_col + i * step].is_empty
                        and not _square_attacked(board, opponent, src_row, src_col + i * step)
                        for i in range(1, abs(d_col))
                    )
                    if path_clear:
                        castling = valid = True
            elif abs(d_row) <= 1 and abs(d_col) <= 1:
                valid = True

        if not valid:
            return None

        new_board = [row[:] for row in board]
        new_board[src_row][src_col] = EMPTY
        if kind is PieceType.PAWN and dest.is_empty and d_col != 0:
            capture_row = dest_row + 1 if color is Color.WHITE else dest_row - 1
            new_board[capture_row][dest_col] = EMPTY

        promoted = kind is PieceType.PAWN and dest_row in (0, BOARD_SIZE - 1)
        new_board[dest_row][dest_col] = Piece(
            PieceType.QUEEN if promoted else kind, src.color, True
        )

        if castling:
            rook_src = 7 if d_col == 2 else 0
            rook_dest = 5 if d_col == 2 else 3
            new_board[src_row][rook_dest] = replace(
                new_board[src_row][rook_src], has_moved=True
            )
            new_board[src_row][rook_src] = EMPTY

        en_passant = None
        if kind is PieceType.PAWN and abs(d_row) == 2:
            en_passant = (src_row + d_row // 2, src_col)

        if _king_in_check(new_board, color):
            return None
        return new_board, en_passant


def new_game() -> GameState:
    """A game in the standard starting position with White to move."""
    board = _empty_board()
    for col, kind in enumerate(_BACK_RANK):
        board[0][col] = Piece(kind, Color.BLACK)
        board[1][col] = Piece(PieceType.PAWN, Color.BLACK)
        board[6][col] = Piece(PieceType.PAWN, Color.WHITE)
        board[7][col] = Piece(kind, Color.WHITE)
    return GameState(board=board)