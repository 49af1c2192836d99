# phistratum

Building blocks for talking to Stratum mining pools. The package holds the data
types for pool connections, jobs and solutions. It builds the JSON-RPC requests
a miner sends in each pool dialect: Stratum, Eth-Proxy, EthereumStratum/1.0.0
and EthereumStratum/2.0.0. It also provides fixed-width 256-bit values for
hashes and targets, including the compact ("nBits") target encoding.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `phistratum.uint256`

This module holds opaque byte blobs that are stored least significant byte
first:

- `BaseBlob`, with the subclasses `Uint160`, `Uint256` and `Uint512`.
- Blob methods: `is_null`, `set_null`, `compare`, `get_hex`, `set_hex` and
  `get_uint64`.
- `Uint256.get_nibble` and `Uint512.trim256`.
- `uint256_from_hex(text)`, which builds a `Uint256` from hex text. Leading
  whitespace and a `0x` prefix are allowed. Parsing stops at the first
  character that is not hex.
- `hex_str(data, spaces=False)`, which renders bytes as lower-case hex.
- `timing_resistant_equal(a, b)`.

### `phistratum.arith`

`ArithUint256` is an unsigned 256-bit integer. Every operation wraps modulo
2**256. Division by zero raises `UintError`.

- The class supports arithmetic, bitwise, shift and comparison operators.
- Methods: `bits`, `low64`, `get_double`, `get_hex` and `set_hex`.
- Compact encoding: `ArithUint256.from_compact(compact)` and
  `get_compact(negative=False)`.
- `decode_compact(compact)` returns `(value, negative, overflow)`.
- `arith_to_uint256` and `uint_to_arith256` convert to and from `Uint256`.

```python
from phistratum.arith import ArithUint256

target = ArithUint256.from_compact(0x1D00FFFF)
print(target.get_hex())      # 00000000ffff followed by 52 zeros
print(hex(target.get_compact()))  # 0x1d00ffff
```

### `phistratum.jobs`

This module holds the data model and its helpers:

- `StratumProtocol` (`STRATUM`, `ETHPROXY`, `ETHEREUMSTRATUM`,
  `ETHEREUMSTRATUM2`) and `SecureLevel` (`NONE`, `TLS`, `TLS12`).
- `PoolConnection`. It holds the host, port, user, path, password,
  `workername` and `sec_level`, plus the negotiation state fields.
  `user_dot_worker()` returns `user.workername`, or only the user when no
  worker name is set.
- `WorkPackage`, `Solution` and `Session`. A `Session` starts with the
  difficulty-1 boundary.
- `parse_extranonce(enonce)` returns `(start_nonce, hex_length)`. It raises
  `ExtranonceError` in these cases:
  - the value is empty, or is not hex;
  - it has an odd number of hex digits;
  - it has more than eight hex digits.
- `process_error(response)` renders the `"error"` member of a pool reply as
  text.
- `target_from_difficulty(difficulty)` returns the share boundary for a pool
  difficulty.
- `to_hex(value, prefix=False, width=16)` and `to_compact_hex(value,
  prefix=False)`.

```python
from phistratum.jobs import parse_extranonce

print(parse_extranonce("0xaf4c"))  # (12631393081587040256, 4), i.e. 0xaf4c000000000000
```

### `phistratum.messages`

This module builds request dictionaries for a given stratum mode:

- `login_request(connection, mode, agent)` builds the first message after
  connecting: `mining.subscribe`, `eth_submitLogin` or `mining.hello`.
- `submit_solution_request(connection, mode, solution, worker_id="")` builds a
  share submission. Its id is 40 plus `solution.midx`.
- `submit_hashrate_request(connection, mode, rate, rate_id, worker_id="")`
  builds a hashrate report with id 9.
- `encode_message(request)` serialises a request as one compact JSON line with
  sorted keys and a trailing newline, encoded as UTF-8.

An unknown mode raises `ValueError`.

```python
from phistratum.jobs import PoolConnection, StratumProtocol
from phistratum.messages import encode_message, login_request

connection = PoolConnection(host="pool.example.com", port=4444, user="wallet", workername="rig1")
request = login_request(connection, StratumProtocol.ETHEREUMSTRATUM2, "agent/1.0")
line = encode_message(request)
```

## What this package does not do

This package builds the pieces only. It does not do the following:

- It opens no network connections and has no TLS transport.
- It does not read or interpret the replies and notifications a pool sends.
- It does not detect the pool's dialect automatically.
- It does not enforce response or work timeouts.
- It provides no command-line program.

To talk to a pool, you supply the socket handling and the handling of replies
yourself. Send the bytes from `encode_message`, and fill `WorkPackage` and
`Session` from the pool's messages.