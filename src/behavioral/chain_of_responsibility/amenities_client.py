"""
amenities_client.py — Client side of the amenities Chain-of-Responsibility demo.

The client usually works with a single handler and is not aware that it is
part of a chain. It sends every requested service to that handler and reports
whether someone served it.

Run with ``python -m behavioral.chain_of_responsibility.amenities_client`` or the
``amenities-chain`` console script.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from behavioral.chain_of_responsibility.amenities_chain import (
    DEFAULT_AMENITIES,
    BaseHandler,
    ChainConfigurationError,
    build_amenities_chain,
    describe_chain,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DemoConfig",
    "client_code",
    "main",
]


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """
    Settings for the command-line demo.

    :param amenities: Amenity tags, one handler per tag, in chain order.
    :param services: Requests the client sends to the entry handler.
    :param subchain_start: Index of the interior node used as the second entry point.
    :param log_level: Logging level name passed to ``logging.basicConfig``.
    """
    amenities: Tuple[str, ...] = DEFAULT_AMENITIES
    services: Tuple[str, ...] = DEFAULT_AMENITIES
    subchain_start: int = 1
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.amenities:
            raise ChainConfigurationError("DemoConfig.amenities must not be empty.")
        if not self.services:
            raise ChainConfigurationError("DemoConfig.services must not be empty.")
        if not 0 <= self.subchain_start < len(self.amenities):
            raise ChainConfigurationError(
                f"DemoConfig.subchain_start={self.subchain_start} is outside the chain "
                f"of {len(self.amenities)} handler(s)."
            )
        if self.log_level not in logging.getLevelNamesMapping():
            raise ChainConfigurationError(f"DemoConfig.log_level={self.log_level!r} is not a logging level name.")


def client_code(
    handler: BaseHandler[str, str],
    services: Iterable[str],
    out: Callable[[str], None] = print,
) -> List[Optional[str]]:
    """
    Sends each service to `handler` and reports the outcome.

    :param handler: Entry point of the chain (head or any interior node).
    :param services: Requested amenities, in order.
    :param out: Line writer, ``print`` by default.
    :return: One result per service; None where the chain did not serve it.
    """
    results: List[Optional[str]] = []
    for service in services:
        out(f"Client: Which {service}?")
        result = handler.handle(service)
        if result is not None:
            out(f"   {result}")
        else:
            out(f"   {service} was unavailable.")
        results.append(result)
    return results


def main(config: Optional[DemoConfig] = None, out: Callable[[str], None] = print) -> int:
    """
    Builds the chain and runs the client on the full chain and on a sub-chain.

    :param config: Demo settings; defaults to ``DemoConfig()``.
    :param out: Line writer, ``print`` by default.
    :return: Process exit status (always 0).
    """
    config = config or DemoConfig()
    logging.basicConfig(level=config.log_level)

    handlers = build_amenities_chain(config.amenities)
    head = handlers[0]
    entry = handlers[config.subchain_start]

    out(f"Chain: {describe_chain(head)}\n")
    client_code(head, config.services, out)
    out("")

    out(f"Subchain: {describe_chain(entry)}\n")
    client_code(entry, config.services, out)

    logger.info("Demo finished for %d service(s).", len(config.services))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
