"""
Chain of Responsibility (Behavioral) — hotel amenities desk.

Intent:
    Pass a request along a chain of handlers; each handler decides either to
    serve the request or to pass it to the next handler.

Participants:
    - BaseHandler (abstract): keeps the next reference and the default
      delegation to it.
    - MatchHandler: one generic concrete handler configured with a predicate,
      a label and a result formatter.
    - AmenityHandler: MatchHandler for string requests naming one amenity.
    - Client: builds the chain and sends requests (see amenities_client.py).

Notes:
    - An unhandled request yields None; it is not an error.
    - Any node can be used as an entry point. Only nodes from the entry point
      onward are consulted.
    - Build the chain first, then dispatch. Handlers keep no per-call state.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

__all__ = [
    "ChainConfigurationError",
    "BaseHandler",
    "MatchHandler",
    "AmenityHandler",
    "DEFAULT_AMENITIES",
    "iter_chain",
    "link",
    "describe_chain",
    "build_amenities_chain",
]

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")

DEFAULT_AMENITIES = ("Gymnasium", "Pool", "Buffet")


class ChainConfigurationError(ValueError):
    """
    Raised when a chain cannot be built from the given handlers or settings.
    """


# ---------- Chain Base ----------

class BaseHandler(ABC, Generic[RequestT, ResultT]):
    """Abstract handler defining the chaining protocol.

    Handlers should only implement their responsibility in `handle`.
    Delegation to the next handler is provided via `_delegate`.

    :param next_handler: Optional next handler in the chain.
    """

    def __init__(self, next_handler: Optional[BaseHandler[RequestT, ResultT]] = None) -> None:
        self._next: Optional[BaseHandler[RequestT, ResultT]] = next_handler

    @property
    def next_handler(self) -> Optional[BaseHandler[RequestT, ResultT]]:
        """
        :return: The successor of this node, or None at the end of the chain.
        """
        return self._next

    @property
    def name(self) -> str:
        """
        :return: Human-readable identifier used in results and chain descriptions.
        """
        return type(self).__name__

    def set_next(self, handler: BaseHandler[RequestT, ResultT]) -> BaseHandler[RequestT, ResultT]:
        """Set the next handler in a fluent manner and return it.

        A previous successor is replaced and becomes unreachable from this node.

        :param handler: The next handler to delegate to.
        :return: The same handler to allow fluent chain building.
        """
        self._next = handler
        return handler

    @abstractmethod
    def handle(self, request: RequestT) -> Optional[ResultT]:
        """Attempt to serve the request or delegate to the next handler.

        :param request: The incoming request.
        :return: Result if served here or further down; None if nobody served it.
        """
        raise NotImplementedError

    def _delegate(self, request: RequestT) -> Optional[ResultT]:
        """Delegate handling to the next handler if present.

        :param request: The incoming request.
        :return: Next handler's result, or None when there is no next handler.
        """
        if self._next is not None:
            logger.debug("%s: forwarding %r to %s", self.name, request, self._next.name)
            return self._next.handle(request)
        logger.debug("%s: end of chain, %r unhandled", self.name, request)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class MatchHandler(BaseHandler[RequestT, ResultT]):
    """
    Generic handler that serves every request its predicate accepts.

    :param label: Identifier of this handler (e.g. "Amenities1").
    :param predicate: Returns True for requests this handler is responsible for.
    :param formatter: Builds the result from the label and the served request.
    :param next_handler: Optional next handler in the chain.
    """

    def __init__(
        self,
        label: str,
        predicate: Callable[[RequestT], bool],
        formatter: Callable[[str, RequestT], ResultT],
        next_handler: Optional[BaseHandler[RequestT, ResultT]] = None,
    ) -> None:
        super().__init__(next_handler)
        self._label = label
        self._predicate = predicate
        self._formatter = formatter

    @property
    def name(self) -> str:
        return self._label

    def handle(self, request: RequestT) -> Optional[ResultT]:
        if self._predicate(request):
            logger.debug("%s: serving %r", self._label, request)
            return self._formatter(self._label, request)
        return self._delegate(request)


def _avail(label: str, request: str) -> str:
    return f"{label}: I'll avail the {request}."


class AmenityHandler(MatchHandler[str, str]):
    """Serves a request naming exactly one amenity (exact string match)."""

    def __init__(self, label: str, amenity: str, next_handler: Optional[BaseHandler[str, str]] = None) -> None:
        super().__init__(label, lambda request: request == amenity, _avail, next_handler)
        self._amenity = amenity

    @property
    def amenity(self) -> str:
        """
        :return: The amenity tag this handler serves.
        """
        return self._amenity


# ---------- Construction helpers ----------

def iter_chain(entry: BaseHandler) -> Iterator[BaseHandler]:
    """
    Walks the chain from `entry` to its last node.

    :param entry: Node to start from; it does not have to be the head.
    :return: Iterator over `entry` and every successor, in order.
    """
    node: Optional[BaseHandler] = entry
    while node is not None:
        yield node
        node = node.next_handler


def link(handlers: Sequence[BaseHandler[RequestT, ResultT]]) -> BaseHandler[RequestT, ResultT]:
    """
    Links handlers in the given order via `set_next`.

    The last handler becomes the end of the chain: any successor it had
    before is dropped, so the chain holds exactly the given nodes.

    :param handlers: Handlers to link; the first one becomes the head.
    :return: The head of the chain.
    :raises ChainConfigurationError: If `handlers` is empty or repeats a node.
    """
    if not handlers:
        raise ChainConfigurationError("A chain needs at least one handler.")
    if len({id(h) for h in handlers}) != len(handlers):
        raise ChainConfigurationError("A handler can appear only once in a chain.")

    head = handlers[0]
    current = head
    for handler in handlers[1:]:
        current = current.set_next(handler)
    current._next = None
    return head


def describe_chain(entry: BaseHandler) -> str:
    """
    :param entry: Node to start from.
    :return: Handler names from `entry` onward, e.g. "Amenities1 > Amenities2".
    """
    return " > ".join(node.name for node in iter_chain(entry))


def build_amenities_chain(amenities: Sequence[str] = DEFAULT_AMENITIES) -> List[AmenityHandler]:
    """Build one AmenityHandler per tag (Amenities1 → Amenities2 → ...).

    Dispatch recurses once per node, so a chain longer than the interpreter's
    recursion limit (``sys.getrecursionlimit()``, 1000 by default) raises
    RecursionError for requests that reach its far end.

    :param amenities: Amenity tags in chain order.
    :return: All nodes of the chain; index 0 is the head, later ones are sub-chain entry points.
    :raises ChainConfigurationError: If no amenities are given.
    """
    if not amenities:
        raise ChainConfigurationError("At least one amenity is required to build a chain.")

    handlers = [AmenityHandler(f"Amenities{i}", amenity) for i, amenity in enumerate(amenities, start=1)]
    link(handlers)
    logger.debug("Built chain: %s", describe_chain(handlers[0]))
    return handlers
