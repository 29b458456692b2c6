from NamePy.Common.Contract import *
from NamePy.Common.ContractErrors import *
from NamePy.Common.Printable import *
import pytest

def test_constants():
    assert DEFAULT_DELIMITER == "."
    assert ESCAPE_CHARACTER == "\\"
    assert len(ESCAPE_CHARACTER) == 1

def test_is_valid_delimiter():
    assert is_valid_delimiter(".")
    assert is_valid_delimiter("/")
    assert not is_valid_delimiter(ESCAPE_CHARACTER)
    assert not is_valid_delimiter("")
    assert not is_valid_delimiter("..")
    assert not is_valid_delimiter(None)
    assert not is_valid_delimiter(46)

def test_each_tier_raises_its_own_error():
    with pytest.raises(IllegalArgumentError):
        assert_argument(False, "bad argument")
    with pytest.raises(InvalidStateError):
        assert_state(False, "bad state")
    with pytest.raises(MethodFailedError):
        assert_method(False, "bad result")

    assert_argument(True, "fine")
    assert_state(True, "fine")
    assert_method(True, "fine")

def test_error_message():
    with pytest.raises(IllegalArgumentError) as exc_info:
        assert_argument(False, "Index must be non-negative")
    assert exc_info.value.message == "Index must be non-negative"

def test_state_description_is_only_built_on_failure():
    calls = []
    def describe() -> str:
        calls.append(1)
        return "state"

    assert_state(True, "fine", describe)
    assert calls == []
    with pytest.raises(InvalidStateError) as exc_info:
        assert_state(False, "broken", describe)
    assert "state" in str(exc_info.value)

def test_argument_type():
    assert_argument_type("oss", str, "must be a string")
    with pytest.raises(IllegalArgumentError):
        assert_argument_type(None, str, "must be a string")
    with pytest.raises(IllegalArgumentError):
        assert_argument_type(1, str, "must be a string")

def test_not_none():
    assert_not_none("", "must be given")
    with pytest.raises(IllegalArgumentError):
        assert_not_none(None, "must be given")

def test_valid_index():
    assert_valid_index(0, 1)
    assert_valid_index(1, 1, allow_end=True)
    assert_valid_index(0, 0, allow_end=True)
    with pytest.raises(IllegalArgumentError):
        assert_valid_index(1, 1)
    with pytest.raises(IllegalArgumentError):
        assert_valid_index(0, 0)
    with pytest.raises(IllegalArgumentError):
        assert_valid_index(-1, 3)
    with pytest.raises(IllegalArgumentError):
        assert_valid_index(False, 3)

def test_valid_components():
    assert_valid_components([])
    assert_valid_components(["a", ""])
    assert_valid_components(("a", "b"))
    with pytest.raises(IllegalArgumentError):
        assert_valid_components(None)
    with pytest.raises(IllegalArgumentError):
        assert_valid_components("ab")
    with pytest.raises(IllegalArgumentError):
        assert_valid_components(["a", None])
    with pytest.raises(IllegalArgumentError):
        assert_valid_components(5)

def test_valid_delimiter():
    assert_valid_delimiter("#")
    with pytest.raises(IllegalArgumentError):
        assert_valid_delimiter("")

def test_service_failure_keeps_trigger():
    trigger = InvalidStateError("Base name must not be empty")
    error = ServiceFailureError("failed to search nodes", trigger)
    assert error.trigger is trigger
    assert "Base name must not be empty" in str(error)
    assert ServiceFailureError("failed").trigger is None

def test_escape_character_is_not_a_delimiter():
    with pytest.raises(IllegalArgumentError):
        assert_valid_delimiter(ESCAPE_CHARACTER)

def test_valid_index_with_corrupted_count():
    # an out-of-range check needs a usable count; a broken one is the receiver's fault
    with pytest.raises(InvalidStateError):
        assert_valid_index(0, None) # type: ignore
    with pytest.raises(InvalidStateError):
        assert_valid_index(0, "2") # type: ignore
    with pytest.raises(IllegalArgumentError):
        assert_valid_index(-1, None) # type: ignore
