import contextlib
import threading
from typing import Iterator


class ReadWriteLock:
    """
    Reader-writer lock: any number of readers or one exclusive writer.

    Writer-preference: once a writer is waiting, new readers queue
    behind it rather than jumping ahead.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def reader_count(self) -> int:
        with self._condition:
            return self._readers

    @property
    def is_writing(self) -> bool:
        with self._condition:
            return self._writer

    def acquire_read(self):
        with self._condition:
            while self._writer or self._waiting_writers > 0:
                self._condition.wait()

            self._readers += 1

    def release_read(self):
        with self._condition:
            if self._readers < 1:
                raise RuntimeError("release_read() called without a reader")

            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self):
        with self._condition:
            self._waiting_writers += 1

            try:
                while self._writer or self._readers > 0:
                    self._condition.wait()

            finally:
                self._waiting_writers -= 1

            self._writer = True

    def release_write(self):
        with self._condition:
            if self._writer is False:
                raise RuntimeError("release_write() called without a writer")

            self._writer = False
            self._condition.notify_all()

    @contextlib.contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield

        finally:
            self.release_read()

    @contextlib.contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield

        finally:
            self.release_write()
