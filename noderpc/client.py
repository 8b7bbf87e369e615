"""Typed Bitcoin Core JSON-RPC client."""

from __future__ import annotations

from typing import Any, List, Optional

from requests.auth import HTTPBasicAuth

from .config import ClientConfig
from .envelope import JSONValue, decode
from .enrichment import resolve_prevouts
from .models import (
    Block,
    BlockchainInfo,
    IndexInfo,
    MempoolInfo,
    MiningInfo,
    NetworkInfo,
    PeerInfo,
    SmartFeeEstimate,
    Transaction,
    TxOutSetInfo,
)
from .transport import Transport

BLOCK_TIMEOUT = 120.0
UTXO_SCAN_TIMEOUT = 1800.0


class NodeRPC:
    """JSON-RPC client with cookie or user/password auth.

    Holds only the endpoint, credentials and default timeout, so one instance
    may be shared between callers. Every call opens its own connection.
    """

    def __init__(
        self,
        url: str,
        username: str = "",
        password: str = "",
        cookie: Optional[tuple[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        if cookie:
            username, password = cookie
        # Sent on every request, even when both values are empty.
        self.auth = HTTPBasicAuth(username, password)
        self.transport = Transport(url, auth=self.auth, timeout=timeout)

    @classmethod
    def from_address(
        cls,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        **kwargs: Any,
    ) -> "NodeRPC":
        return cls(f"http://{host}:{port}", username=username, password=password, **kwargs)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "NodeRPC":
        username, password = config.credentials()
        return cls(
            config.rpc_url,
            username=username,
            password=password,
            timeout=config.bitcoin_rpc_timeout,
        )

    def request(
        self,
        shape: Any,
        method: str,
        *params: JSONValue,
        timeout: Optional[float] = None,
    ) -> Any:
        raw = self.transport.send(method, list(params), timeout=timeout)
        return decode(raw, shape)

    # Status calls ---------------------------------------------------------

    def get_blockchain_info(self) -> BlockchainInfo:
        return self.request(BlockchainInfo, "getblockchaininfo")

    def get_network_info(self) -> NetworkInfo:
        return self.request(NetworkInfo, "getnetworkinfo")

    def get_mining_info(self) -> MiningInfo:
        return self.request(MiningInfo, "getmininginfo")

    def get_mempool_info(self) -> MempoolInfo:
        return self.request(MempoolInfo, "getmempoolinfo")

    def get_peer_info(self) -> List[PeerInfo]:
        return self.request(List[PeerInfo], "getpeerinfo")

    def get_index_info(self) -> IndexInfo:
        return self.request(IndexInfo, "getindexinfo")

    def get_block_count(self) -> int:
        return self.request(int, "getblockcount")

    def get_block_hash(self, height: int) -> str:
        return self.request(str, "getblockhash", height)

    def get_difficulty(self) -> float:
        return self.request(float, "getdifficulty")

    def estimate_smart_fee(self, conf_target: int) -> SmartFeeEstimate:
        return self.request(SmartFeeEstimate, "estimatesmartfee", conf_target)

    # Blocks and transactions ---------------------------------------------

    def get_block(self, block_hash: str) -> Block:
        return self.request(Block, "getblock", str(block_hash), 2, timeout=BLOCK_TIMEOUT)

    def get_block_hex(self, block_hash: str) -> str:
        return self.request(str, "getblock", str(block_hash), 0, timeout=BLOCK_TIMEOUT)

    def get_raw_mempool(self) -> List[str]:
        return self.request(List[str], "getrawmempool", timeout=BLOCK_TIMEOUT)

    def get_raw_transaction(self, txid: str) -> Transaction:
        return self.request(
            Transaction, "getrawtransaction", str(txid), True, timeout=BLOCK_TIMEOUT
        )

    def get_raw_transaction_with_prevouts(self, txid: str) -> Transaction:
        """Fetch ``txid`` and attach the output each of its inputs spends."""

        return resolve_prevouts(self.get_raw_transaction(txid), self.get_raw_transaction)

    def get_txoutset_info(self) -> TxOutSetInfo:
        return self.request(TxOutSetInfo, "gettxoutsetinfo", timeout=UTXO_SCAN_TIMEOUT)
