"""
Printer interface: buffered writing of commands and styled text to a sink.

The sink is any object with ``write(bytes)``; ``flush()`` is called when
present. AsyncPrinter additionally awaits ``drain()`` (asyncio StreamWriter)
or an awaitable ``flush()``.

Nothing is sent until the buffer reaches ``buffer_size`` or ``flush()`` is
called. Bytes accepted by ``write()`` leave the buffer even if the following
``flush()``/``drain()`` fails, so they are never sent twice.

Example:
    >>> import io
    >>> from escpos_text.model.styled_text import text
    >>> sink = io.BytesIO()
    >>> with Printer(sink) as printer:
    ...     printer.initialize().println(text("Welcome!").bold())
    >>> sink.getvalue()
    b'\\x1b@\\x1bE\\x01Welcome!\\x1bE\\x00\\n'
"""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from types import TracebackType
from typing import Any, Dict, Final, Optional, Type, Union

from escpos_text.escpos.commands.hardware import ESC_INIT_PRINTER
from escpos_text.escpos.renderer import StyledTextRenderer
from escpos_text.exceptions import PrinterClosedError, PrinterError, PrinterIOError
from escpos_text.model.styled_text import NodeLike

__all__ = ["Printer", "AsyncPrinter", "DEFAULT_BUFFER_SIZE"]

logger: Final = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE: Final[int] = 4096


class _PrinterBase:
    def __init__(
        self,
        writer: Any,
        encoding: str = "utf-8",
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        owns_writer: bool = False,
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._writer = writer
        self._renderer = StyledTextRenderer(encoding=encoding)
        self._buffer = bytearray()
        self._buffer_size = buffer_size
        self._owns_writer = owns_writer
        self._closed = False

    @property
    def writer(self) -> Any:
        return self._writer

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet handed to the writer."""
        return len(self._buffer)

    @property
    def closed(self) -> bool:
        return self._closed

    def _queue(self, data: bytes) -> bool:
        """Buffer data; return True when the buffer should be flushed."""
        if self._closed:
            raise PrinterClosedError("Printer is closed")
        self._buffer += data
        return len(self._buffer) >= self._buffer_size

    def _write_pending(self) -> None:
        """Hand buffered bytes to the writer and drop them from the buffer."""
        if self._closed:
            raise PrinterClosedError("Printer is closed")
        if not self._buffer:
            return
        data = bytes(self._buffer)
        try:
            self._writer.write(data)
        except OSError as exc:
            raise self._io_failure("write", exc) from exc
        self._buffer.clear()
        logger.debug("Flushed %d bytes to printer", len(data))

    def _close_failed(self, exc: OSError, pending: Optional[PrinterError]) -> Optional[PrinterIOError]:
        """Return the error to raise for a failed close, or None if another error is already in flight."""
        if pending is not None:
            logger.error("Printer close failed after earlier error (%s): %s", pending, exc)
            return None
        return self._io_failure("close", exc)

    def _io_failure(self, action: str, exc: OSError) -> PrinterIOError:
        logger.error("Printer %s failed: %s", action, exc)
        return PrinterIOError(f"Printer {action} failed: {exc}")


class Printer(_PrinterBase):
    """
    Synchronous printer.

    All sending methods return the printer so calls can be chained.

    Raises:
        PrinterIOError: From any method that reaches the writer, if it fails.
        PrinterClosedError: When used after ``close()``.
    """

    @classmethod
    def open(
        cls,
        path: Optional[Union[str, Path]] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> "Printer":
        """
        Open a device file (e.g. /dev/usb/lp0) for writing.

        Missing arguments are taken from ``load_config()``: ``default_device``,
        ``text_encoding`` and ``write_buffer_size``.

        Raises:
            PrinterIOError: If the device cannot be opened.
            ValueError: If ``write_buffer_size`` is not a positive integer.
        """
        if config is None:
            from escpos_text import load_config

            config = load_config()
        device = Path(path if path is not None else config["default_device"])
        try:
            handle = open(device, "wb")
        except OSError as exc:
            logger.error("Cannot open printer device %s: %s", device, exc)
            raise PrinterIOError(f"Cannot open printer device {device}: {exc}") from exc

        try:
            printer = cls(
                handle,
                encoding=config.get("text_encoding", "utf-8"),
                buffer_size=int(config.get("write_buffer_size", DEFAULT_BUFFER_SIZE)),
                owns_writer=True,
            )
        except (TypeError, ValueError):
            handle.close()
            logger.error("Invalid printer configuration for %s", device)
            raise

        logger.info("Opened printer device %s", device)
        return printer

    def send(self, *commands: bytes) -> "Printer":
        """Queue one or more raw command byte strings."""
        for command in commands:
            self.send_raw(command)
        return self

    def send_raw(self, data: bytes) -> "Printer":
        if self._queue(bytes(data)):
            self.flush()
        return self

    def print(self, value: NodeLike) -> "Printer":
        """Queue styled text without a line feed."""
        return self.send_raw(self._renderer.render(value))

    def println(self, value: NodeLike) -> "Printer":
        """Queue styled text followed by a line feed."""
        return self.send_raw(self._renderer.render_line(value))

    def initialize(self) -> "Printer":
        """Reset the printer to its power-on modes (ESC @)."""
        return self.send(ESC_INIT_PRINTER)

    def flush(self) -> "Printer":
        """Hand buffered bytes to the writer and flush it."""
        self._write_pending()
        flush = getattr(self._writer, "flush", None)
        if flush is not None:
            try:
                flush()
            except OSError as exc:
                raise self._io_failure("flush", exc) from exc
        return self

    def close(self) -> None:
        """Flush pending data; close the writer if this printer opened it."""
        if self._closed:
            return
        pending: Optional[PrinterError] = None
        try:
            self.flush()
        except PrinterError as exc:
            pending = exc
            raise
        finally:
            self._closed = True
            if self._owns_writer:
                try:
                    self._writer.close()
                except OSError as exc:
                    error = self._close_failed(exc, pending)
                    if error is not None:
                        raise error from exc

    def __enter__(self) -> "Printer":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncPrinter(_PrinterBase):
    """
    Asynchronous printer for asyncio writers.

    Example:
        >>> reader, writer = await asyncio.open_connection("printer.local", 9100)
        >>> async with AsyncPrinter(writer) as printer:
        ...     await printer.println(text("Hello").bold())
    """

    async def send(self, *commands: bytes) -> "AsyncPrinter":
        for command in commands:
            await self.send_raw(command)
        return self

    async def send_raw(self, data: bytes) -> "AsyncPrinter":
        if self._queue(bytes(data)):
            await self.flush()
        return self

    async def print(self, value: NodeLike) -> "AsyncPrinter":
        return await self.send_raw(self._renderer.render(value))

    async def println(self, value: NodeLike) -> "AsyncPrinter":
        return await self.send_raw(self._renderer.render_line(value))

    async def initialize(self) -> "AsyncPrinter":
        return await self.send(ESC_INIT_PRINTER)

    async def flush(self) -> "AsyncPrinter":
        self._write_pending()
        drain = getattr(self._writer, "drain", None) or getattr(self._writer, "flush", None)
        if drain is not None:
            try:
                result = drain()
                if inspect.isawaitable(result):
                    await result
            except OSError as exc:
                raise self._io_failure("drain", exc) from exc
        return self

    async def close(self) -> None:
        """Flush pending data; close the writer and wait for it if this printer owns it."""
        if self._closed:
            return
        pending: Optional[PrinterError] = None
        try:
            await self.flush()
        except PrinterError as exc:
            pending = exc
            raise
        finally:
            self._closed = True
            if self._owns_writer:
                try:
                    result = self._writer.close()
                    if inspect.isawaitable(result):
                        await result
                    # asyncio.StreamWriter.close() only schedules the close
                    wait_closed = getattr(self._writer, "wait_closed", None)
                    if wait_closed is not None:
                        await wait_closed()
                except OSError as exc:
                    error = self._close_failed(exc, pending)
                    if error is not None:
                        raise error from exc

    async def __aenter__(self) -> "AsyncPrinter":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()
