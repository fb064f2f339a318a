import asyncio
import datetime
import io
import os
import pathlib
import sys
import threading
from typing import Dict, TextIO, TypeVar

import msgspec

from sysresolvers.logging.config import LoggingConfig, StreamType
from sysresolvers.logging.models import Entry, Log

T = TypeVar("T", bound=Entry)

DEFAULT_TEMPLATE = (
    "{timestamp} - {level} - {thread_id} - "
    "{filename}:{function_name}.{line_number} - {message}"
)


class LoggerStream:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template or DEFAULT_TEMPLATE
        self._default_logfile = filename
        self._default_log_directory = directory

        self._config = LoggingConfig()
        self._files: Dict[str, io.BufferedWriter] = {}
        self._file_locks: Dict[str, asyncio.Lock] = {}
        self._loop: asyncio.AbstractEventLoop | None = None
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        return self._closed

    def _streams(self) -> Dict[StreamType, TextIO]:
        # Resolved per write so redirected or captured streams are honoured.
        return {
            StreamType.STDOUT: sys.stdout,
            StreamType.STDERR: sys.stderr,
        }

    async def log(
        self,
        entry_or_log: T | Log[T],
        template: str | None = None,
    ):
        if self._closed:
            return

        if isinstance(entry_or_log, Log):
            log = entry_or_log

        else:
            log = Log(
                entry=entry_or_log,
                filename="<unknown>",
                function_name="<unknown>",
                line_number=0,
            )

        if self._config.enabled(self._name, log.entry.level) is False:
            return

        if self._loop is None:
            self._loop = asyncio.get_running_loop()

        logfile_path = self._to_logfile_path()
        if logfile_path:
            await self._log_to_file(log, logfile_path)

        else:
            await self._log_to_stream(log, template or self._default_template)

    async def _log_to_stream(
        self,
        log: Log[T],
        template: str,
    ):
        stream = self._streams()[self._config.output]

        line = log.entry.to_template(
            template,
            context={
                "filename": log.filename,
                "function_name": log.function_name,
                "line_number": log.line_number,
                "thread_id": log.thread_id,
                "timestamp": log.timestamp,
            },
        )

        await self._loop.run_in_executor(
            None,
            self._write_line,
            stream,
            line,
        )

    def _write_line(self, stream: TextIO, line: str):
        stream.write(line + "\n")
        stream.flush()

    async def _log_to_file(self, log: Log[T], logfile_path: str):
        lock = self._file_locks.setdefault(logfile_path, asyncio.Lock())

        async with lock:
            logfile = self._files.get(logfile_path)
            if logfile is None or logfile.closed:
                logfile = await self._loop.run_in_executor(
                    None,
                    self._open_file,
                    logfile_path,
                )

                self._files[logfile_path] = logfile

            await self._loop.run_in_executor(
                None,
                self._write_to_file,
                log,
                logfile,
            )

    def _open_file(self, logfile_path: str) -> io.BufferedWriter:
        pathlib.Path(logfile_path).parent.mkdir(parents=True, exist_ok=True)
        return open(logfile_path, "ab")

    def _write_to_file(self, log: Log[T], logfile: io.BufferedWriter):
        logfile.write(msgspec.json.encode(log) + b"\n")
        logfile.flush()

    def _to_logfile_path(self) -> str | None:
        if self._default_logfile is None:
            return None

        directory = self._default_log_directory
        if directory is None:
            directory = os.getcwd()

        return os.path.join(directory, self._default_logfile)

    async def close(self):
        self._closed = True

        for logfile_path, logfile in list(self._files.items()):
            if logfile.closed is False:
                await asyncio.get_running_loop().run_in_executor(
                    None,
                    logfile.close,
                )

            self._files.pop(logfile_path, None)


def current_thread_id() -> int:
    return threading.get_native_id()


def current_timestamp() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat()
