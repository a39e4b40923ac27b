"""Exceptions raised by the printer I/O layer."""


class PrinterError(Exception):
    """Base class for printer errors."""


class PrinterIOError(PrinterError):
    """Writing to or flushing the output sink failed (device offline, broken pipe, ...)."""


class PrinterClosedError(PrinterError):
    """Operation attempted on a printer that has been closed."""
