import pytest

from core.domain.handlers import Notification, ThrowsValidationHandler
from core.domain.validation import Error
from core.exceptions import DomainError


def test_notification_accumulates_errors_in_detection_order():
    notification = Notification.create()
    assert not notification.has_error()

    notification.append(Error("first")).append(Error("second")).append(Error("first"))

    assert notification.has_error()
    assert [e.message for e in notification.get_errors()] == ["first", "second", "first"]
    assert notification.first_error() == Error("first")


def test_notification_factories_and_merge():
    seeded = Notification.create(Error("a"), Error("b"))
    from_exc = Notification.from_exception(RuntimeError("gateway down"))

    seeded.append(from_exc)

    assert seeded.errors == [Error("a"), Error("b"), Error("gateway down")]
    assert from_exc.errors == [Error("gateway down")]
    assert Notification.create().first_error() is None


def test_notification_validate_returns_result_or_captures_failure():
    notification = Notification.create()

    assert notification.validate(lambda: 42) == 42
    assert not notification.has_error()

    def _domain_failure():
        raise DomainError.with_errors([Error("x"), Error("y")])

    def _plain_failure():
        raise ValueError("boom")

    assert notification.validate(_domain_failure) is None
    assert notification.validate(_plain_failure) is None
    assert [e.message for e in notification.errors] == ["x", "y", "boom"]


def test_throws_handler_raises_on_first_error():
    handler = ThrowsValidationHandler()

    with pytest.raises(DomainError) as exc:
        handler.append(Error("'name' should not be null."))

    assert exc.value.errors == [Error("'name' should not be null.")]
    assert str(exc.value) == "'name' should not be null."
    assert handler.get_errors() == []
    assert not handler.has_error()


def test_throws_handler_raises_with_all_errors_of_appended_handler():
    handler = ThrowsValidationHandler()
    collected = Notification.create(Error("a"), Error("b"))

    with pytest.raises(DomainError) as exc:
        handler.append(collected)

    assert exc.value.errors == [Error("a"), Error("b")]


def test_throws_handler_validate_wraps_any_exception():
    handler = ThrowsValidationHandler()
    assert handler.validate(lambda: "ok") == "ok"

    def _fail():
        raise KeyError("missing")

    with pytest.raises(DomainError) as exc:
        handler.validate(_fail)
    assert exc.value.errors == [Error(str(KeyError("missing")))]


def test_error_is_a_value_type():
    assert Error("same") == Error("same")
    assert Error("same") != Error("other")
    assert len({Error("same"), Error("same")}) == 1


def test_notification_errors_cannot_be_changed_from_outside():
    notification = Notification.create(Error("kept"))

    notification.get_errors().append(Error("sneaky"))
    notification.errors.clear()

    assert notification.get_errors() == [Error("kept")]
