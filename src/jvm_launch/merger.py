"""Relay a child's stdout and stderr to ours, line by line.

Two reader threads hand (stream, line) events to the calling thread through
a zero-capacity rendezvous. Each reader finishes with one sentinel event
(line=None); the caller stops after it has seen both.
"""

import sys
import threading
from enum import Enum
from typing import IO, Callable, NamedTuple

from jvm_launch import log


class StreamId(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class Event(NamedTuple):
    stream: StreamId
    line: str | None

    @property
    def is_sentinel(self) -> bool:
        return self.line is None


class Rendezvous:
    """Unbuffered handoff: put() returns only once get() has taken the item.

    After close(), pending and future put() calls return False instead of blocking.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._item = None
        self._full = False
        self._closed = False
        self._offered = 0
        self._taken = 0

    def put(self, item) -> bool:
        with self._cond:
            # One item in flight; other producers queue up behind it.
            while self._full and not self._closed:
                self._cond.wait()
            if self._closed:
                return False
            self._item = item
            self._full = True
            self._offered += 1
            ticket = self._offered
            self._cond.notify_all()
            while self._taken < ticket and not self._closed:
                self._cond.wait()
            return self._taken >= ticket

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def get(self):
        with self._cond:
            while not self._full:
                self._cond.wait()
            item = self._item
            self._item = None
            self._full = False
            self._taken += 1
            self._cond.notify_all()
            return item


def drain(stream: IO[str], stream_id: StreamId, channel: Rendezvous) -> None:
    """Publish every line of ``stream`` then a sentinel.

    A read error ends the stream early; it is logged, not raised.
    Stops quietly once the channel is closed.
    """
    try:
        for raw in iter(stream.readline, ""):
            if not channel.put(Event(stream_id, raw.removesuffix("\n"))):
                return
    except (OSError, ValueError) as e:
        log.error(f"error while reading child {stream_id.value}: {e}")
    channel.put(Event(stream_id, None))


class StreamMerger:
    """Fan-in of a child's two output streams onto the parent's.

    Parent streams default to sys.stdout/sys.stderr as they are at merge time.
    """

    def __init__(self, stdout: IO[str] | None = None, stderr: IO[str] | None = None):
        self.stdout = stdout
        self.stderr = stderr

    def _targets(self) -> dict[StreamId, IO[str]]:
        return {
            StreamId.STDOUT: self.stdout if self.stdout is not None else sys.stdout,
            StreamId.STDERR: self.stderr if self.stderr is not None else sys.stderr,
        }

    def merge(
        self,
        child_stdout: IO[str],
        child_stderr: IO[str],
        on_abort: Callable[[], None] | None = None,
    ) -> None:
        """Block until both child streams are exhausted.

        If writing to a parent stream fails, the channel is closed, ``on_abort``
        is called (to make the child's streams end) and the readers are joined
        before the error propagates.
        """
        targets = self._targets()
        channel = Rendezvous()
        readers = [
            threading.Thread(
                target=drain,
                args=(child_stderr, StreamId.STDERR, channel),
                name="jvm-launch-stderr",
                daemon=True,
            ),
            threading.Thread(
                target=drain,
                args=(child_stdout, StreamId.STDOUT, channel),
                name="jvm-launch-stdout",
                daemon=True,
            ),
        ]
        for reader in readers:
            reader.start()

        try:
            finished = 0
            while finished < len(readers):
                event = channel.get()
                if event.is_sentinel:
                    finished += 1
                    continue
                target = targets[event.stream]
                target.write(event.line + "\n")
                target.flush()
        except BaseException:
            channel.close()
            if on_abort is not None:
                on_abort()
            raise
        finally:
            for reader in readers:
                reader.join()
