import pytest

from cwcounter.errors import StdError, Unauthorized
from cwcounter.state import (
    STATE,
    Item,
    State,
    get_contract_version,
    set_contract_version,
)


def test_load_missing_raises():
    with pytest.raises(StdError, match="not found"):
        STATE.load({})


def test_may_load_missing_is_none():
    assert STATE.may_load({}) is None


def test_save_load_round_trip():
    storage = {}
    state = State(count=17, owner="creator")
    STATE.save(storage, state)
    assert STATE.load(storage) == state
    assert STATE.may_load(storage) == state


def test_update_persists_and_returns_new_value():
    storage = {}
    STATE.save(storage, State(count=1, owner="creator"))

    def bump(state):
        state.count += 1
        return state

    result = STATE.update(storage, bump)
    assert result == STATE.load(storage)
    assert result.count == 2


def test_failed_update_leaves_storage_unchanged():
    storage = {}
    original = State(count=7, owner="creator")
    STATE.save(storage, original)

    def deny(state):
        state.count = 0
        raise Unauthorized()

    with pytest.raises(Unauthorized):
        STATE.update(storage, deny)
    assert STATE.load(storage) == original


def test_loaded_value_is_a_copy():
    storage = {}
    STATE.save(storage, State(count=3, owner="creator"))
    loaded = STATE.load(storage)
    loaded.count = 99
    assert STATE.load(storage).count == 3


def test_items_use_separate_keys():
    storage = {}
    other = Item("other", State)
    STATE.save(storage, State(count=1, owner="a"))
    other.save(storage, State(count=2, owner="b"))
    assert STATE.load(storage) == State(count=1, owner="a")
    assert other.load(storage) == State(count=2, owner="b")


@pytest.mark.parametrize("raw", [b"garbage", b"[1]", b'{"count":1}'])
def test_corrupt_storage_raises(raw):
    storage = {b"state": raw}
    with pytest.raises(StdError):
        STATE.load(storage)


def test_contract_version_round_trip():
    storage = {}
    set_contract_version(storage, "crates.io:osmo", "0.1.0")
    assert get_contract_version(storage) == ("crates.io:osmo", "0.1.0")


def test_contract_version_missing_raises():
    with pytest.raises(StdError):
        get_contract_version({})