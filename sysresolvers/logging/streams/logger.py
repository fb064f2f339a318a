from __future__ import annotations

import asyncio
import pathlib
import sys
from typing import Dict, TypeVar

from sysresolvers.logging.models import Entry, Log

from .logger_stream import LoggerStream, current_thread_id, current_timestamp

T = TypeVar("T", bound=Entry)

DEFAULT_LOGFILE = "sysresolvers.json"


class Logger:
    def __init__(self) -> None:
        self._streams: Dict[str, LoggerStream] = {}

    def __getitem__(self, name: str) -> LoggerStream:
        if self._streams.get(name) is None:
            self._streams[name] = LoggerStream(name=name)

        return self._streams[name]

    def configure(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ) -> LoggerStream:
        """
        Replace the named stream. A ``path`` with a suffix names the log
        file; a path without one is a directory holding ``sysresolvers.json``.
        """
        if name is None:
            name = "default"

        filename: str | None = None
        directory: str | None = None

        if path:
            logfile_path = pathlib.Path(path)
            is_logfile = len(logfile_path.suffix) > 0

            filename = logfile_path.name if is_logfile else DEFAULT_LOGFILE
            directory = (
                str(logfile_path.parent.absolute())
                if is_logfile
                else str(logfile_path.absolute())
            )

        self._streams[name] = LoggerStream(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
        )

        return self._streams[name]

    async def log(
        self,
        entry: T,
        name: str | None = None,
        template: str | None = None,
    ):
        if name is None:
            name = "default"

        frame = sys._getframe(1)
        code = frame.f_code

        await self[name].log(
            Log(
                entry=entry,
                filename=code.co_filename,
                function_name=code.co_name,
                line_number=frame.f_lineno,
                thread_id=current_thread_id(),
                timestamp=current_timestamp(),
            ),
            template=template,
        )

    async def close(self):
        if len(self._streams) > 0:
            await asyncio.gather(
                *[stream.close() for stream in self._streams.values()]
            )
