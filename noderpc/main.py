"""Command line summary of a node's state."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .client import NodeRPC
from .config import CredentialsError, load_config
from .errors import NodeRPCError

LOGGER = logging.getLogger(__name__)


def _resolve_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def summarize(client: NodeRPC, include_txoutset: bool = False) -> list[str]:
    """Render the node summary as JSON documents, one per call."""

    sections = [
        client.get_blockchain_info().model_dump_json(indent=2),
        client.get_mining_info().model_dump_json(indent=2),
        f"Difficulty: {client.get_difficulty()}",
    ]
    if include_txoutset:
        LOGGER.info("Scanning the UTXO set, this can take several minutes")
        sections.append(client.get_txoutset_info().model_dump_json(indent=2))
    return sections


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Bitcoin node RPC summary")
    parser.add_argument("--healthcheck", action="store_true", help="Load configuration and exit")
    parser.add_argument(
        "--txoutset", action="store_true", help="Include the (slow) UTXO set summary"
    )
    args = parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(
        level=_resolve_log_level(config.noderpc_log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.healthcheck:
        LOGGER.info("Configuration loaded for %s", config.rpc_url)
        return

    try:
        client = NodeRPC.from_config(config)
    except (CredentialsError, OSError) as exc:
        LOGGER.error("Cannot load RPC credentials: %s", exc)
        raise SystemExit(1) from exc
    try:
        sections = summarize(client, include_txoutset=args.txoutset)
    except NodeRPCError as exc:
        LOGGER.error("RPC call failed: %s", exc)
        raise SystemExit(1) from exc
    for section in sections:
        print(section)


if __name__ == "__main__":
    main()
