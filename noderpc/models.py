"""Typed records decoded from node responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeRecord(BaseModel):
    """Immutable projection of a node response; unknown fields are dropped."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class BlockchainInfo(NodeRecord):
    chain: str
    blocks: int
    headers: int
    best_block_hash: str = Field(alias="bestblockhash")
    difficulty: float
    median_time: int = Field(alias="mediantime")
    initial_block_download: bool = Field(alias="initialblockdownload")
    size_on_disk: int
    pruned: bool


class NetworkInfo(NodeRecord):
    version: int
    network_active: bool = Field(alias="networkactive")


class MiningInfo(NodeRecord):
    blocks: int
    difficulty: float
    network_hash_ps: float = Field(alias="networkhashps")
    pooled_tx: int = Field(alias="pooledtx")
    chain: str


class MempoolInfo(NodeRecord):
    size: int
    bytes: int
    usage: int
    max_mempool: int = Field(alias="maxmempool")
    mempool_min_fee: float = Field(alias="mempoolminfee")
    min_relay_tx_fee: float = Field(alias="minrelaytxfee")


class SmartFeeEstimate(NodeRecord):
    fee_rate: Optional[float] = Field(default=None, alias="feerate")
    blocks: int
    errors: List[str] = Field(default_factory=list)


class PeerInfo(NodeRecord):
    id: int
    addr: str
    network: str


class TxIndex(NodeRecord):
    synced: bool
    best_block_height: int


class IndexInfo(NodeRecord):
    # Absent when the node runs without -txindex.
    txindex: Optional[TxIndex] = None


class TxOutScripts(NodeRecord):
    address: Optional[str] = None


class TxOut(NodeRecord):
    value: float
    n: Optional[int] = None
    script_pub_key: TxOutScripts = Field(alias="scriptPubKey")


class TxIn(NodeRecord):
    """Transaction input. Coinbase inputs carry neither ``txid`` nor ``vout``.

    ``prevout`` is never sent by the node for the calls made here; it is only
    filled in by :func:`noderpc.enrichment.resolve_prevouts`.
    """

    txid: Optional[str] = None
    vout: Optional[int] = None
    prevout: Optional[TxOut] = None


class Transaction(NodeRecord):
    txid: str
    vin: List[TxIn]
    vout: List[TxOut]


class Block(NodeRecord):
    hash: str
    confirmations: int
    size: int
    height: int
    version: int
    tx: List[Transaction]


class TxOutSetInfo(NodeRecord):
    height: int
    best_block: str = Field(alias="bestblock")
    txouts: int
    total_amount: float
