#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/utils/io_utils.py
"""I/O utilities for handling output destinations.

Renderers write their output piece by piece to a *text sink*: any object
with a ``write(str)`` method. This module turns the destinations accepted by
the public API (a file path, a text stream or a binary stream) into such a
sink.

"""

from __future__ import annotations

import codecs
import io
from contextlib import contextmanager
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Generator, Union, cast

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes.

    Parameters
    ----------
    output : file-like
        An object with a ``write`` method

    Returns
    -------
    bool
        True for binary streams, False for text streams or when the mode
        cannot be determined

    """
    # Concrete types first
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    # io base classes (standard streams, open() results)
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    # mode attribute, for file objects that aren't io subclasses
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def describe_sink(output: object) -> str:
    """Short human-readable name for an output destination, used in errors and logs."""
    if isinstance(output, (str, Path)):
        return str(output)
    name = getattr(output, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(output).__name__}>"


@contextmanager
def open_text_sink(output: OutputDestination, encoding: str = "utf-8") -> Generator[IO[str], None, None]:
    """Open an output destination as a text sink.

    Parameters
    ----------
    output : str, Path, IO[bytes] or IO[str]
        - str or Path: the file is created (or truncated) and closed on exit
        - IO[str]: written to directly, left open
        - IO[bytes]: wrapped in an encoding writer, left open
    encoding : str, default "utf-8"
        Encoding for paths and binary streams. Encoding is strict, so text
        the encoding cannot represent raises ``UnicodeEncodeError`` on write.

    Yields
    ------
    IO[str]
        Object accepting ``str`` writes

    Raises
    ------
    TypeError
        If ``output`` is neither a path nor a writable object
    OSError
        If a path cannot be opened for writing

    """
    if isinstance(output, (str, Path)):
        # newline="" keeps "\n" as-is on every platform
        with open(output, "w", encoding=encoding, newline="") as file:
            yield file
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if is_binary_stream(output):
        writer = codecs.getwriter(encoding)(cast(IO[bytes], output), errors="strict")
        yield cast(IO[str], writer)
    else:
        yield cast(IO[str], output)


__all__ = ["OutputDestination", "is_binary_stream", "describe_sink", "open_text_sink"]
