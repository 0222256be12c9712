import pytest

from core.either import Either, Left, Right


def test_left_and_right_flags_and_accessors():
    left = Left("failure")
    right = Right(10)

    assert left.is_left and not left.is_right
    assert right.is_right and not right.is_left
    assert left.get_left() == "failure"
    assert right.get() == 10

    with pytest.raises(ValueError):
        left.get()
    with pytest.raises(ValueError):
        right.get_left()


def test_map_only_touches_right():
    assert Right(2).map(lambda v: v * 3) == Right(6)
    assert Left("err").map(lambda v: v * 3) == Left("err")


def test_map_left_only_touches_left():
    assert Left("err").map_left(str.upper) == Left("ERR")
    assert Right(1).map_left(str.upper) == Right(1)


def test_bimap_and_fold():
    assert Left("e").bimap(len, str) == Left(1)
    assert Right(5).bimap(len, str) == Right("5")

    assert Left("e").fold(lambda e: f"left:{e}", lambda v: f"right:{v}") == "left:e"
    assert Right(7).fold(lambda e: f"left:{e}", lambda v: f"right:{v}") == "right:7"


def test_flat_map_and_get_or_else():
    def _halve(value: int) -> Either[str, int]:
        return Right(value // 2) if value % 2 == 0 else Left("odd")

    assert Right(8).flat_map(_halve) == Right(4)
    assert Right(3).flat_map(_halve) == Left("odd")
    assert Left("earlier").flat_map(_halve) == Left("earlier")

    assert Right(1).get_or_else(0) == 1
    assert Left("x").get_or_else(0) == 0


def test_attempt_captures_exceptions_as_left():
    ok = Either.attempt(lambda: "value")
    assert ok == Right("value")

    def _boom():
        raise RuntimeError("Gateway error")

    failed = Either.attempt(_boom)
    assert failed.is_left
    assert isinstance(failed.get_left(), RuntimeError)
    assert str(failed.get_left()) == "Gateway error"
