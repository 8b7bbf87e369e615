"""Resolve the previous outputs spent by a transaction's inputs."""

from __future__ import annotations

import logging
from typing import Callable, List

from .errors import NodeRPCError
from .models import Transaction, TxIn

LOGGER = logging.getLogger(__name__)

TransactionLookup = Callable[[str], Transaction]


def resolve_prevouts(tx: Transaction, lookup: TransactionLookup) -> Transaction:
    """Return a copy of ``tx`` with ``prevout`` set on every resolvable input.

    One ``lookup`` per input that references a previous output, issued in
    input order. Inputs whose lookup fails or whose referenced output is
    missing keep ``prevout`` unset; the call as a whole does not fail.
    """

    inputs: List[TxIn] = [_resolve_input(txin, lookup) for txin in tx.vin]
    return tx.model_copy(update={"vin": inputs})


def _resolve_input(txin: TxIn, lookup: TransactionLookup) -> TxIn:
    if txin.txid is None or txin.vout is None:
        return txin
    try:
        previous = lookup(txin.txid)
    except NodeRPCError as exc:
        LOGGER.debug("Previous transaction %s unavailable: %s", txin.txid, exc)
        return txin
    for output in previous.vout:
        if output.n is not None and output.n == txin.vout:
            return txin.model_copy(update={"prevout": output})
    LOGGER.debug("Output %s:%s not found", txin.txid, txin.vout)
    return txin
