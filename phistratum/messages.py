"""Builders for the JSON-RPC requests a miner sends to a stratum pool."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from .jobs import PoolConnection, Solution, StratumProtocol, to_compact_hex, to_hex

LOGIN_ID = 1
HASHRATE_ID = 9
SOLUTION_ID_BASE = 40

ETHEREUM_STRATUM_1 = "EthereumStratum/1.0.0"
ETHEREUM_STRATUM_2 = "EthereumStratum/2.0.0"


def _protocol(mode: int) -> StratumProtocol:
    try:
        return StratumProtocol(mode)
    except ValueError:
        raise ValueError(f"unknown stratum mode {mode}") from None


def login_request(connection: PoolConnection, mode: int, agent: str) -> Dict[str, Any]:
    """The first request sent after the socket connects, for the given stratum flavour."""
    protocol = _protocol(mode)
    request: Dict[str, Any] = {"id": LOGIN_ID, "method": "mining.subscribe", "params": []}

    if protocol is StratumProtocol.STRATUM:
        request["jsonrpc"] = "2.0"
        request["params"].append(agent)
    elif protocol is StratumProtocol.ETHPROXY:
        request["method"] = "eth_submitLogin"
        if connection.workername:
            request["worker"] = connection.workername
        request["params"].append(connection.user + connection.path)
        if connection.password:
            request["params"].append(connection.password)
    elif protocol is StratumProtocol.ETHEREUMSTRATUM:
        request["params"].extend([agent, ETHEREUM_STRATUM_1])
    else:
        request["method"] = "mining.hello"
        request["params"] = {
            "agent": agent,
            "host": connection.host,
            "port": to_compact_hex(connection.port & 0xFFFFFFFF),
            "proto": ETHEREUM_STRATUM_2,
        }
    return request


def submit_hashrate_request(
    connection: PoolConnection, mode: int, rate: int, rate_id: str, worker_id: str = ""
) -> Dict[str, Any]:
    """A hashrate report; rate_id is the 0x-prefixed miner id, worker_id the v2 worker id."""
    protocol = _protocol(mode)
    request: Dict[str, Any] = {"id": HASHRATE_ID, "params": []}

    if protocol is not StratumProtocol.ETHEREUMSTRATUM2:
        request["jsonrpc"] = "2.0"
        if connection.workername:
            request["worker"] = connection.workername
        request["method"] = "eth_submitHashrate"
        request["params"].append(to_hex(rate, True, 32))
        request["params"].append(rate_id)
    else:
        request["method"] = "mining.hashrate"
        request["params"].append(to_compact_hex(rate))
        request["params"].append(worker_id)
    return request


def submit_solution_request(
    connection: PoolConnection, mode: int, solution: Solution, worker_id: str = ""
) -> Dict[str, Any]:
    """A share submission; its id is 40 plus the index of the miner that found it."""
    protocol = _protocol(mode)
    work = solution.work
    request: Dict[str, Any] = {
        "id": SOLUTION_ID_BASE + solution.midx,
        "method": "mining.submit",
        "params": [],
    }
    params = request["params"]

    if protocol is StratumProtocol.STRATUM:
        request["jsonrpc"] = "2.0"
        params.extend(
            [
                connection.user_dot_worker(),
                work.job,
                to_hex(solution.nonce, True),
                "0x" + work.header.get_hex(),
                "0x" + solution.mix_hash.get_hex(),
            ]
        )
        if connection.workername:
            request["worker"] = connection.workername
    elif protocol is StratumProtocol.ETHPROXY:
        request["method"] = "eth_submitWork"
        params.extend(
            [
                to_hex(solution.nonce, True),
                "0x" + work.header.get_hex(),
                "0x" + solution.mix_hash.get_hex(),
            ]
        )
        if connection.workername:
            request["worker"] = connection.workername
    elif protocol is StratumProtocol.ETHEREUMSTRATUM:
        params.extend(
            [
                connection.user_dot_worker(),
                work.job,
                to_hex(solution.nonce)[work.ex_size_bytes:],
            ]
        )
    else:
        params.extend([work.job, to_hex(solution.nonce)[work.ex_size_bytes:], worker_id])
    return request


def encode_message(request: Mapping[str, Any]) -> bytes:
    """Serialise a request as one compact JSON line with sorted keys, newline terminated."""
    text = json.dumps(request, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return (text + "\n").encode("utf-8")