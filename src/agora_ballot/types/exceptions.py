"""Exception hierarchy for the ballot record codecs."""

from __future__ import annotations


class CodecError(Exception):
    """
    Base exception for all encoding and decoding errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class FormatError(CodecError):
    """
    Raised when decoded bytes do not describe the expected record.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        offset: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode {type_name}: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)


class UnderrunError(CodecError):
    """
    Raised when a buffer runs out of bytes in the middle of a field.

    Attributes:
        type_name: The type being decoded when the buffer ran dry.
        expected_bytes: Number of bytes the field needed.
        actual_bytes: Number of bytes that were left.
    """

    def __init__(
        self,
        type_name: str,
        *,
        expected_bytes: int,
        actual_bytes: int,
    ) -> None:
        self.type_name = type_name
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes

        super().__init__(
            f"Buffer underrun while reading {type_name}: "
            f"needed {expected_bytes} bytes, got {actual_bytes}"
        )
