"""Tests for Square."""

from types import SimpleNamespace

import pytest

from board_game_grid import OneOf, Piece, Point, Square


class Checker(Piece):
    pass


class TestSquareSerialisation:
    def test_as_json_with_piece(self) -> None:
        square = Square(id=1, x=2, y=3, piece=Checker(id=1, player_number=1))
        assert square.as_json() == {
            "id": 1,
            "x": 2,
            "y": 3,
            "piece": {"id": 1, "player_number": 1, "type": "checker"},
        }

    def test_as_json_without_piece(self) -> None:
        square = Square(id=1, x=2, y=3)
        assert square.as_json() == {"id": 1, "x": 2, "y": 3, "piece": None}

    @pytest.mark.parametrize(
        "piece", [None, Checker(id=4, player_number=2), Piece(id=5, player_number=1)]
    )
    def test_round_trip(self, piece: Piece | None) -> None:
        record = Square(id=9, x=4, y=1, piece=piece).as_json()
        assert Square.from_json(record).as_json() == record

    def test_from_json_keeps_piece_instances(self) -> None:
        checker = Checker(id=1, player_number=1)
        square = Square.from_json({"id": 1, "x": 0, "y": 0, "piece": checker})
        assert square.piece is checker

    def test_from_json_rebuilds_piece_records(self) -> None:
        square = Square.from_json(
            {"id": 1, "x": 0, "y": 0, "piece": {"id": 3, "player_number": 2, "type": "checker"}}
        )
        assert isinstance(square.piece, Checker)
        assert square.piece.player_number == 2


class TestAttributeMatch:
    def test_match(self) -> None:
        assert Square(id=1, x=2, y=3).attribute_match("x", 2)

    def test_mismatch(self) -> None:
        assert not Square(id=1, x=2, y=3).attribute_match("x", 4)

    def test_nested_match(self) -> None:
        piece = SimpleNamespace(player_number=4)
        square = Square(id=1, x=2, y=3, piece=piece)  # type: ignore[arg-type]
        assert square.attribute_match("piece", {"player_number": 4})

    def test_nested_mismatch(self) -> None:
        piece = SimpleNamespace(player_number=4)
        square = Square(id=1, x=2, y=3, piece=piece)  # type: ignore[arg-type]
        assert not square.attribute_match("piece", {"player_number": 6})

    def test_nested_on_empty_square(self) -> None:
        assert not Square(id=1, x=2, y=3).attribute_match("piece", {"player_number": 1})

    def test_membership(self) -> None:
        square = Square(id=1, x=2, y=3)
        assert square.attribute_match("y", [1, 3])
        assert not square.attribute_match("y", (4, 5))

    def test_predicate(self) -> None:
        assert Square(id=1, x=2, y=3).attribute_match("y", lambda y: y % 2 == 1)

    def test_explicit_matcher(self) -> None:
        assert Square(id=1, x=2, y=3).attribute_match("x", OneOf({2, 5}))

    def test_none_equality(self) -> None:
        assert Square(id=1, x=2, y=3).attribute_match("piece", None)


class TestOccupancy:
    def test_occupied(self) -> None:
        square = Square(id=1, x=2, y=3, piece=Piece(id=1, player_number=1))
        assert square.is_occupied
        assert not square.is_unoccupied

    def test_unoccupied(self) -> None:
        square = Square(id=1, x=2, y=3)
        assert square.is_unoccupied
        assert not square.is_occupied

    def test_occupied_by_player(self) -> None:
        square = Square(id=1, x=2, y=3, piece=Piece(id=1, player_number=1))
        assert square.is_occupied_by_player(1)
        assert not square.is_occupied_by_player(2)

    def test_occupied_by_opponent(self) -> None:
        square = Square(id=1, x=2, y=3, piece=Piece(id=1, player_number=2))
        assert square.is_occupied_by_opponent(1)
        assert not square.is_occupied_by_opponent(2)

    def test_empty_square_has_no_owner(self) -> None:
        square = Square(id=1, x=2, y=3)
        assert not square.is_occupied_by_player(1)
        assert not square.is_occupied_by_opponent(1)

    def test_occupied_by_piece(self) -> None:
        square = Square(id=1, x=0, y=0, piece=Checker(id=1, player_number=1))
        assert square.is_occupied_by_piece(Checker)
        assert square.is_occupied_by_piece(Piece)
        assert square.is_occupied_by_piece("checker")
        assert not square.is_occupied_by_piece("piece")
        assert not Square(id=2, x=0, y=1).is_occupied_by_piece(Piece)

    def test_piece_is_mutable(self) -> None:
        square = Square(id=1, x=0, y=0)
        square.piece = Piece(id=1, player_number=1)
        assert square.is_occupied

    def test_coordinates_are_read_only(self) -> None:
        square = Square(id=1, x=0, y=0)
        with pytest.raises(AttributeError):
            square.x = 3  # type: ignore[misc]


class TestSquareIdentity:
    def test_same_id_is_equal(self) -> None:
        assert Square(id=1, x=2, y=3) == Square(id=1, x=2, y=3)

    def test_same_id_different_fields_is_equal(self) -> None:
        assert Square(id=1, x=2, y=3) == Square(id=1, x=5, y=5)

    def test_different_id_is_not_equal(self) -> None:
        assert Square(id=1, x=2, y=3) != Square(id=2, x=3, y=4)

    def test_not_equal_to_other_types(self) -> None:
        assert Square(id=1, x=2, y=3) != 1

    def test_hash_follows_id(self) -> None:
        assert len({Square(id=1, x=2, y=3), Square(id=1, x=0, y=0)}) == 1

    def test_point(self) -> None:
        assert Square(id=1, x=2, y=3).point == Point(2, 3)
