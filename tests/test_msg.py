import pytest

from cwcounter.errors import StdError
from cwcounter.msg import (
    I32_MAX,
    I32_MIN,
    CountResponse,
    GetCount,
    Increment,
    InstantiateMsg,
    Reset,
    parse_count_response,
    parse_execute_msg,
    parse_instantiate_msg,
    parse_query_msg,
    to_binary,
)


def test_increment_wire_form():
    assert to_binary(Increment()) == b'{"increment":{}}'


def test_reset_wire_form():
    assert to_binary(Reset(count=5)) == b'{"reset":{"count":5}}'


def test_get_count_wire_form():
    assert to_binary(GetCount()) == b'{"get_count":{}}'


@pytest.mark.parametrize(
    "msg", [Increment(), Reset(count=5), Reset(count=I32_MIN), Reset(count=I32_MAX)]
)
def test_execute_round_trip(msg):
    assert parse_execute_msg(to_binary(msg)) == msg


def test_query_round_trip():
    assert parse_query_msg(to_binary(GetCount())) == GetCount()


def test_instantiate_round_trip():
    msg = InstantiateMsg(count=17)
    assert parse_instantiate_msg(to_binary(msg)) == msg


def test_count_response_round_trip():
    resp = CountResponse(count=-3)
    assert parse_count_response(to_binary(resp)) == resp


def test_parse_accepts_text():
    assert parse_instantiate_msg('{"count": 17}') == InstantiateMsg(count=17)


def test_parse_ignores_unknown_fields():
    assert parse_execute_msg(b'{"reset":{"count":4,"extra":1}}') == Reset(count=4)


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b"[]",
        b'{"unknown":{}}',
        b'{"reset":{}}',
        b'{"reset":{"count":"5"}}',
        b'{"reset":{"count":true}}',
        b'{"reset":{"count":2147483648}}',
        b'{"increment":{},"reset":{"count":1}}',
        b'{"increment":[]}',
    ],
)
def test_invalid_execute_messages_raise(data):
    with pytest.raises(StdError):
        parse_execute_msg(data)


def test_execute_variant_rejected_as_query():
    with pytest.raises(StdError):
        parse_query_msg(to_binary(Increment()))


def test_unserialisable_value_raises():
    with pytest.raises(StdError):
        to_binary(object())