"""
Piece Count Representation

Counts are read straight from python-chess bitboards, so building the
vectors costs a handful of popcounts regardless of board contents.

Layout of piece_counts():
    row 0: White    row 1: Black
    columns: pawn, knight, bishop, rook, queen, king
"""

import chess
import numpy as np

# Column order shared by piece_counts(), material_vector() and the
# evaluator's weight vector.
PIECE_TYPES = (
    chess.PAWN,
    chess.KNIGHT,
    chess.BISHOP,
    chess.ROOK,
    chess.QUEEN,
    chess.KING,
)

COLOR_ROWS = {chess.WHITE: 0, chess.BLACK: 1}


def piece_counts(board: chess.Board) -> np.ndarray:
    """
    Count pieces per colour and type.

    Args:
        board: python-chess Board object

    Returns:
        numpy int32 array of shape (2, 6); row 0 White, row 1 Black
    """
    counts = np.zeros((2, len(PIECE_TYPES)), dtype=np.int32)

    for color, row in COLOR_ROWS.items():
        for col, piece_type in enumerate(PIECE_TYPES):
            counts[row, col] = chess.popcount(board.pieces_mask(piece_type, color))

    return counts


def material_vector(board: chess.Board) -> np.ndarray:
    """
    Signed piece counts from White's perspective.

    Args:
        board: python-chess Board object

    Returns:
        numpy int32 array of shape (6,): White count minus Black count
        for each piece type in PIECE_TYPES order
    """
    counts = piece_counts(board)
    return counts[0] - counts[1]


def mirror(board: chess.Board) -> chess.Board:
    """
    Colour-reversed copy of a position.

    Every piece changes colour and the board is flipped vertically; side to
    move, castling rights and en passant square are swapped accordingly.
    The input board is not modified.
    """
    return board.mirror()
