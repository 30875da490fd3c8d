from termwidgets.prompt import FocusState
from termwidgets.status import Status
from termwidgets.text_state import TextState


def test_default_state():
    state = TextState()
    assert state.status is Status.PENDING
    assert state.focus_state is FocusState.UNFOCUSED
    assert state.value == ""
    assert not state.is_finished()


def test_with_status():
    assert TextState().with_status(Status.DONE).is_finished()
    assert TextState().with_status(Status.ABORTED).is_finished()
    assert not TextState().with_status(Status.PENDING).is_finished()


def test_with_focus():
    state = TextState().with_focus(FocusState.FOCUSED)
    assert state.is_focused()


def test_with_value_does_not_change_original():
    original = TextState()
    updated = original.with_value("value")
    assert updated.value == "value"
    assert original.value == ""


def test_insert_multibyte_start():
    test = TextState().with_value("äë")
    test.move_start()
    test.push("Ï")
    assert test.value == "Ïäë"
    assert test.position == 1


def test_insert_multibyte_middle():
    test = TextState().with_value("äë")
    test.move_right()
    test.push("Ï")
    assert test.value == "äÏë"
    assert test.position == 2


def test_insert_multibyte_end():
    test = TextState().with_value("äë")
    test.move_end()
    test.push("Ï")
    assert test.value == "äëÏ"
    assert test.position == 3


def test_delete_multibyte_start():
    test = TextState().with_value("äë")
    test.move_start()
    test.delete()
    assert test.value == "ë"
    assert test.position == 0


def test_delete_multibyte_middle():
    test = TextState().with_value("äë")
    test.move_right()
    test.delete()
    assert test.value == "ä"
    assert test.position == 1


def test_delete_multibyte_end():
    test = TextState().with_value("äë")
    test.move_end()
    test.delete()
    assert test.value == "äë"
    assert test.position == 2


def test_backspace_multibyte_start():
    test = TextState().with_value("äë")
    test.move_start()
    test.backspace()
    assert test.value == "äë"
    assert test.position == 0


def test_backspace_multibyte_middle():
    test = TextState().with_value("äë")
    test.move_right()
    test.backspace()
    assert test.value == "ë"
    assert test.position == 0


def test_backspace_multibyte_end():
    test = TextState().with_value("äë")
    test.move_end()
    test.backspace()
    assert test.value == "ä"
    assert test.position == 1