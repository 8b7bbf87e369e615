import logging

import pytest

from noderpc.errors import UnauthorizedError
from noderpc.main import _resolve_log_level, main, summarize
from noderpc.models import BlockchainInfo, MiningInfo, TxOutSetInfo


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "BITCOIN_RPC_USER",
        "BITCOIN_RPC_PASSWORD",
        "BITCOIN_RPC_URL",
        "BITCOIN_RPC_COOKIE_PATH",
        "BITCOIN_DATADIR",
        "NODERPC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class DummyClient:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def get_blockchain_info(self) -> BlockchainInfo:
        self.calls.append("getblockchaininfo")
        return BlockchainInfo(
            chain="regtest",
            blocks=101,
            headers=101,
            best_block_hash="ab" * 32,
            difficulty=4.6e-10,
            median_time=1700000000,
            initial_block_download=False,
            size_on_disk=30000,
            pruned=False,
        )

    def get_mining_info(self) -> MiningInfo:
        self.calls.append("getmininginfo")
        return MiningInfo(blocks=101, difficulty=4.6e-10, network_hash_ps=0.0, pooled_tx=0, chain="regtest")

    def get_difficulty(self) -> float:
        self.calls.append("getdifficulty")
        return 4.6e-10

    def get_txoutset_info(self) -> TxOutSetInfo:
        self.calls.append("gettxoutsetinfo")
        return TxOutSetInfo(height=101, best_block="ab" * 32, txouts=101, total_amount=5050.0)


def test_resolve_log_level_is_case_insensitive():
    assert _resolve_log_level("debug") == logging.DEBUG
    assert _resolve_log_level(" Info ") == logging.INFO


def test_resolve_log_level_rejects_invalid_values():
    with pytest.raises(ValueError):
        _resolve_log_level("not-a-level")


def test_summarize_skips_txoutset_by_default():
    client = DummyClient()

    sections = summarize(client)  # type: ignore[arg-type]

    assert client.calls == ["getblockchaininfo", "getmininginfo", "getdifficulty"]
    assert '"chain": "regtest"' in sections[0]
    assert sections[2] == "Difficulty: 4.6e-10"


def test_summarize_includes_txoutset_when_requested():
    client = DummyClient()

    sections = summarize(client, include_txoutset=True)  # type: ignore[arg-type]

    assert client.calls[-1] == "gettxoutsetinfo"
    assert '"total_amount": 5050.0' in sections[-1]


def test_main_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr("noderpc.main.NodeRPC.from_config", lambda config: DummyClient())

    main([])

    out = capsys.readouterr().out
    assert "best_block_hash" in out
    assert "Difficulty:" in out


def test_main_exits_on_rpc_failure(monkeypatch):
    class FailingClient(DummyClient):
        def get_blockchain_info(self) -> BlockchainInfo:
            raise UnauthorizedError(status_code=401)

    monkeypatch.setattr("noderpc.main.NodeRPC.from_config", lambda config: FailingClient())

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1


def test_main_healthcheck_skips_rpc(monkeypatch):
    def _fail_build(config):  # pragma: no cover - indicates regression
        raise AssertionError("healthcheck must not contact the node")

    monkeypatch.setattr("noderpc.main.NodeRPC.from_config", _fail_build)

    main(["--healthcheck"])


def test_main_exits_on_malformed_cookie(monkeypatch, tmp_path):
    cookie = tmp_path / ".cookie"
    cookie.write_text("no-separator", encoding="utf-8")
    monkeypatch.setenv("BITCOIN_RPC_COOKIE_PATH", str(cookie))

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1
