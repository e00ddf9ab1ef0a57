"""Recording path capability for tests.

Test-double pattern: records every call and its arguments, replays queued
responses, and falls back to a real path capability when the queue is
empty.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from datalocations.domain.ports.path_api import PathApiPort
from datalocations.infrastructure.adapters.node_path import PosixPathApi

if TYPE_CHECKING:
    from collections.abc import Iterable

    from datalocations.domain.model.parsed_path import ParsedPath


class RecordingPathApi(PathApiPort):
    """Path capability that records its calls.

    Attributes:
        called_list: Method names, in call order
        param_list: Positional arguments of each call, in call order
    """

    def __init__(
        self,
        responses: Iterable[object] = (),
        delegate: PathApiPort | None = None,
    ) -> None:
        """Initialize recorder.

        Args:
            responses: Values returned by the next calls, in order
            delegate: Answers calls once `responses` runs out.
                None = PosixPathApi().
        """
        self.called_list: list[str] = []
        self.param_list: list[tuple[object, ...]] = []
        self._responses: deque[object] = deque(responses)
        self._delegate = delegate if delegate is not None else PosixPathApi()

    @property
    def sep(self) -> str:  # type: ignore[override]
        return self._delegate.sep

    @property
    def delimiter(self) -> str:  # type: ignore[override]
        return self._delegate.delimiter

    def queue(self, *responses: object) -> None:
        """Append responses for upcoming calls."""
        self._responses.extend(responses)

    def reset(self) -> None:
        """Forget recorded calls and queued responses."""
        self.called_list.clear()
        self.param_list.clear()
        self._responses.clear()

    def _call(self, name: str, *args: object) -> object:
        self.called_list.append(name)
        self.param_list.append(args)
        if self._responses:
            return self._responses.popleft()
        return getattr(self._delegate, name)(*args)

    def normalize(self, path: str) -> str:
        return self._call("normalize", path)  # type: ignore[return-value]

    def basename(self, path: str, ext: str | None = None) -> str:
        return self._call("basename", path, ext)  # type: ignore[return-value]

    def dirname(self, path: str) -> str:
        return self._call("dirname", path)  # type: ignore[return-value]

    def extname(self, path: str) -> str:
        return self._call("extname", path)  # type: ignore[return-value]

    def is_absolute(self, path: str) -> bool:
        return self._call("is_absolute", path)  # type: ignore[return-value]

    def join(self, *paths: str) -> str:
        return self._call("join", *paths)  # type: ignore[return-value]

    def parse(self, path: str) -> ParsedPath:
        return self._call("parse", path)  # type: ignore[return-value]

    def format(self, parts: ParsedPath) -> str:
        return self._call("format", parts)  # type: ignore[return-value]

    def relative(self, from_path: str, to_path: str) -> str:
        return self._call("relative", from_path, to_path)  # type: ignore[return-value]

    def resolve(self, *paths: str) -> str:
        return self._call("resolve", *paths)  # type: ignore[return-value]

    def to_namespaced_path(self, path: str) -> str:
        return self._call("to_namespaced_path", path)  # type: ignore[return-value]
