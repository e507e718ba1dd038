"""Runtime environments for RISP.

An Environment stores bindings of names to evaluated values. The
EnvironmentStack layers call-local environments over one global environment to
implement dynamic scoping: a function body sees whichever frames are active at
call time, never the frames active where the function was declared.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Mapping, Optional

from risp.types.value import Value

logger = logging.getLogger(__name__)


class Environment:
    """Flat mapping from names to RISP values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[str, Value]] = None):
        self.vars: dict[str, Value] = dict(bindings) if bindings else {}

    def set(self, name: str, value: Value) -> None:
        self.vars[name] = value

    def get(self, name: str) -> Optional[Value]:
        return self.vars.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __repr__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()


class EnvironmentStack:
    """One global Environment plus a LIFO stack of call-local Environments."""

    __slots__ = ("global_environment", "frames")

    def __init__(self):
        self.global_environment: Environment = Environment()
        self.frames: list[Environment] = []

    @property
    def depth(self) -> int:
        """Number of active call-local frames."""
        return len(self.frames)

    def set(self, name: str, value: Value) -> None:
        """Bind `name` in the innermost call frame, or globally outside any call."""
        if self.frames:
            self.frames[-1].set(name, value)
        else:
            self.global_environment.set(name, value)

    def get(self, name: str) -> Optional[Value]:
        """Look up `name`, newest call frame first, then the global environment.

        Returns None when the name is unbound; callers decide whether that is
        an error.
        """
        for frame in reversed(self.frames):
            if name in frame:
                return frame.get(name)
        return self.global_environment.get(name)

    def push_environment(self, bindings: Mapping[str, Value]) -> None:
        self.frames.append(Environment(bindings))
        logger.debug("pushed call frame %d with %s", len(self.frames), list(bindings))

    def pop_environment(self) -> Optional[Environment]:
        """Discard the innermost call frame. Never removes the global environment."""
        if not self.frames:
            return None
        frame = self.frames.pop()
        logger.debug("popped call frame %d", len(self.frames) + 1)
        return frame

    @contextmanager
    def call_frame(self, bindings: Mapping[str, Value]) -> Iterator[Environment]:
        """Push a frame for the duration of the block, popping it even on error."""
        self.push_environment(bindings)
        try:
            yield self.frames[-1]
        finally:
            self.pop_environment()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<EnvironmentStack: ")
            chain = [repr(frame) for frame in reversed(self.frames)]
            chain.append(repr(self.global_environment))
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
