# cwcounter

cwcounter is a small counter contract. Anyone may increment the counter, and only the account that instantiated the contract may reset it. Messages are sent as JSON. Storage is a plain mutable mapping from bytes to bytes, so an ordinary `dict` works.

## Install

```
pip install cwcounter
pip install "cwcounter[test]"   # adds pytest, for running the tests
```

## Using the contract

```python
from cwcounter.contract import MessageInfo, execute, instantiate, query
from cwcounter.errors import Unauthorized
from cwcounter.msg import GetCount, Increment, InstantiateMsg, Reset, parse_count_response

storage = {}
creator = MessageInfo(sender="creator")

response = instantiate(storage, creator, InstantiateMsg(count=17))
print(response.attributes)  # [('method', 'instantiate'), ('owner', 'creator'), ('count', '17')]

execute(storage, MessageInfo(sender="anyone"), Increment())
print(parse_count_response(query(storage, GetCount())).count)  # 18

try:
    execute(storage, MessageInfo(sender="anyone"), Reset(count=5))
except Unauthorized:
    print("only the owner may reset")

execute(storage, creator, Reset(count=5))
```

Instantiation writes two things to storage: the counter state (`cwcounter.state.STATE`) and the contract name and version. You can read the name and version back with `cwcounter.state.get_contract_version`. An increment that would take the count above the largest 32-bit signed integer raises `OverflowError`.

### Messages on the wire

- `to_binary(value)` turns any message, or any plain JSON value, into compact JSON bytes.
- `parse_instantiate_msg`, `parse_execute_msg`, `parse_query_msg` and `parse_count_response` turn JSON back into message objects.
- Execute and query messages use the snake_case externally tagged form, for example `{"increment":{}}`, `{"reset":{"count":5}}` and `{"get_count":{}}`.
- Count fields must be integers in the 32-bit signed range.

### Storage helpers

`cwcounter.state.Item` keeps one JSON-encoded dataclass under a single storage key. It has four methods:

- `load` raises `StdError` when nothing is stored.
- `may_load` returns `None` when nothing is stored.
- `save` stores a value.
- `update` loads, transforms, saves and returns the new value.

## Talking to a deployed contract

`cwcounter.helpers.CwTemplateContract` wraps a contract address:

- `call(msg)` returns a `WasmExecuteMsg` that holds the address and the encoded execute message.
- `count(querier)` calls `querier(addr, msg_bytes)` with an encoded `get_count` query, decodes the reply and returns a `CountResponse`.

## Errors

Every contract failure derives from `cwcounter.errors.ContractError`:

- `StdError` covers storage, parsing and serialisation problems.
- `Unauthorized` is raised when someone other than the owner tries a reset.
- `CustomError` carries a string value of its own.

## What it does not do

The package has no command-line tool. It does not generate or export JSON Schema files for its messages. It is also not a chain or a test harness: you supply the storage mapping and the querier yourself.