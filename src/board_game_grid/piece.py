"""Polymorphic piece base class and piece-type registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Final

from board_game_grid.errors import UnknownPieceTypeError

if TYPE_CHECKING:
    from board_game_grid.square import Square
    from board_game_grid.square_set import SquareSet

_LOGGER = logging.getLogger(__name__)

# Player 1 moves up the board (decreasing y), player 2 moves down.
FORWARDS_DIRECTION: Final[Mapping[int, int]] = {1: -1, 2: 1}


class Piece:
    """A piece owned by a player.

    Concrete piece types subclass this and override :meth:`destinations`;
    subclasses are registered under their :attr:`type` tag so serialized
    pieces can be rebuilt with :meth:`from_json`.
    """

    _registry: ClassVar[dict[str, type[Piece]]] = {}

    def __init__(self, id: Any, player_number: int) -> None:
        self._id = id
        self._player_number = player_number

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        Piece._register(cls)

    @classmethod
    def _register(cls, piece_cls: type[Piece]) -> None:
        tag = piece_cls.type_tag()
        previous = cls._registry.get(tag)
        if previous is not None and previous is not piece_cls:
            _LOGGER.warning(
                "Piece type %r re-registered: %s replaces %s",
                tag,
                piece_cls.__qualname__,
                previous.__qualname__,
            )
        cls._registry[tag] = piece_cls

    @classmethod
    def type_tag(cls) -> str:
        """Lower-cased class name, e.g. ``Rook`` → ``"rook"``."""
        return cls.__name__.lower()

    # ── Identity / ownership ─────────────────────────────────────────────

    @property
    def id(self) -> Any:
        return self._id

    @property
    def player_number(self) -> int:
        return self._player_number

    @property
    def type(self) -> str:
        return self.type_tag()

    @property
    def opponent(self) -> int:
        """The opposing player number."""
        return 2 if self._player_number == 1 else 1

    @property
    def forwards_direction(self) -> int:
        """Sign of y for a forward step: -1 for player 1, 1 for player 2."""
        return FORWARDS_DIRECTION[self._player_number]

    # ── Move generation ──────────────────────────────────────────────────

    def destinations(self, square: Square, game_state: Any) -> SquareSet:
        """All squares the piece can move to and/or capture on.

        *game_state* is passed through untouched; its shape is defined by
        the game built on top of this package.
        """
        from board_game_grid.square_set import SquareSet

        return SquareSet()

    def move_squares(self, square: Square, game_state: Any) -> SquareSet:
        return self.destinations(square, game_state)

    def capture_squares(self, square: Square, game_state: Any) -> SquareSet:
        return self.destinations(square, game_state)

    def potential_capture_squares(self, square: Square, game_state: Any) -> SquareSet:
        """Squares the piece would capture on if an enemy piece stood there."""
        return self.capture_squares(square, game_state)

    def can_move(self, from_square: Square, to_square: Square, game_state: Any) -> bool:
        return to_square in self.destinations(from_square, game_state)

    # ── Serialisation ────────────────────────────────────────────────────

    def as_json(self) -> dict[str, Any]:
        return {"id": self._id, "player_number": self._player_number, "type": self.type}

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> Piece:
        """Rebuild a piece from :meth:`as_json` output.

        The ``type`` field picks the registered subclass; a missing tag
        means the base :class:`Piece`.

        The registry is process-wide and keyed by :meth:`type_tag`, so when
        two subclasses share a tag the last one defined wins. Games that
        live side by side should override :meth:`type_tag` (e.g.
        ``"checkers-king"``) to keep their pieces apart.
        """
        tag = record.get("type", Piece.type_tag())
        try:
            piece_cls = cls._registry[tag]
        except KeyError:
            raise UnknownPieceTypeError(f"Unknown piece type: {tag!r}") from None
        return piece_cls(id=record["id"], player_number=record["player_number"])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, "
            f"player_number={self._player_number!r})"
        )


Piece._register(Piece)
