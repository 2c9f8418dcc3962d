# starknet-indexer

Building blocks for storing indexed Starknet blockchain data in a relational
database. The package has no dependencies outside the standard library.

## What it contains

### `starknet_indexer.storage`

- **`enums`** — `CallType` and `EntrypointType` (integer enums with `parse()`
  from a node's string and `str()` back to it; unrecognised strings give
  `UNKNOWN`), the `ClassType` bit mask with `with_types()`, `has()` and
  `one_of()`, and `class_type_from_interfaces()` which builds a mask from
  interface names such as `"erc20"`, `"proxy"` or `"braavos"`.
- **`encoding`** — `RawJson`, raw JSON kept as bytes (`to_json()`,
  `from_json()`, lenient `from_hex()` and strict `parse_hex()` that accepts a
  `0x` prefix and raises `ValueError` on bad input), and `dump_parsed()`, which
  encodes parsed calldata as compact JSON with `<`, `>`, `&`, U+2028 and
  U+2029 escaped, returning `None` for absent or unencodable values.
- **`filters`** — filter dataclasses (`IntegerFilter`, `TimeFilter`,
  `BetweenFilter`, `EnumFilter`, `EnumStringFilter`, `StringFilter`,
  `EqualityFilter`, `BytesFilter`, `IdFilter`), `SortOrder`, and
  `FilterOptions.build()` which applies option functions:
  `with_limit_filter`, `with_offset_filter`, `with_sort_filter`,
  `with_asc_sort_by_id_filter`, `with_desc_sort_by_id_filter`,
  `with_multi_sort`, `with_max_height` and `with_cursor`. Non-positive limits
  and offsets are ignored.
- **Models** — `Address`, `Class`, `ClassReplace` (`address`), `Block`
  (`block`), `Declare` (`declare`), `Deploy` and `DeployAccount` (`deploy`),
  `Event` (`event`), `Fee` (`fee`), `Internal` (`internal`), `Invoke`
  (`invoke`), `L1Handler` (`l1_handler`) and `Message` (`message`), each with
  its matching `*Filter` dataclass where one exists. Every model has a
  `table_name`. The transaction, call, event and message models have
  `columns()` and `flat()`, which return the column names and one row of
  values in the same order, ready for bulk copying; parsed calldata, data and
  results are serialised with `dump_parsed()` in that row.

### `starknet_indexer.starknet`

- **`interfaces`** — an ABI model (`Abi`, `AbiFunction`, `AbiEvent`,
  `AbiParam`) built with `Abi.from_json()` from the ABI's JSON array;
  `load_interfaces()` reads every `*.json` file of a directory as an interface
  named by its file stem; `implements_interface()` and `find_interfaces()`
  check that an ABI has every function, L1 handler and event of an interface
  with the same argument types.
- **`tokens`** — `BridgedToken`, `load_bridged_tokens()` (reads a JSON array
  of tokens; only the first call in a process does anything) and
  `bridged_tokens()`; `is_valid_hash()` (32-byte check); and
  `PROXY_STORAGE_VARS`, well-known proxy storage keys mapped to their bytes.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Examples

Class types:

```python
from starknet_indexer.storage.enums import ClassType, class_type_from_interfaces

ct = class_type_from_interfaces("erc20", "proxy")
assert ct.has(ClassType.ERC20)
assert ct.one_of(ClassType.ERC721, ClassType.PROXY)
```

Query options:

```python
from starknet_indexer.storage.filters import (
    FilterOptions, SortOrder, with_limit_filter, with_sort_filter,
)

opts = FilterOptions.build(with_limit_filter(10), with_sort_filter("id", SortOrder.DESC))
assert opts.limit == 10 and opts.sort_field == "id"
```

Rows for bulk copying:

```python
from starknet_indexer.storage.invoke import Invoke

invoke = Invoke(id=1, height=100, entrypoint="transfer", parsed_calldata={"amount": "5"})
row = dict(zip(invoke.columns(), invoke.flat()))
assert row["parsed_calldata"] == '{"amount":"5"}'
```

Interface detection:

```python
from starknet_indexer.starknet.interfaces import Abi, find_interfaces, load_interfaces

interfaces = load_interfaces("interfaces")
abi = Abi.from_json(
    '[{"type": "function", "name": "balanceOf",'
    ' "inputs": [{"name": "account", "type": "felt"}],'
    ' "outputs": [{"name": "balance", "type": "Uint256"}]}]'
)
names = find_interfaces(abi, interfaces)
```

Bridged tokens:

```python
from starknet_indexer.starknet.tokens import bridged_tokens, load_bridged_tokens

load_bridged_tokens("bridged_tokens.json")
for token in bridged_tokens():
    print(token.symbol, token.decimals)
```

## What it does not do

This package defines the data and the helper logic only. It does not connect
to a database, create tables, run queries or apply the filters to anything;
it does not fetch blocks from a Starknet node, run an indexing loop, serve
subscriptions over the network, or offer a command-line program.