"""Base class for the signed records carried in transaction payloads."""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING

from typing_extensions import Self

from agora_ballot.crypto import Hash, KeyPair, PublicKey, Signature, hash_full
from agora_ballot.types import FormatError, StrictBaseModel

logger = logging.getLogger(__name__)


class SignedRecord(StrictBaseModel, ABC):
    """
    A record that is hashed, signed by one key and sent as raw bytes.

    Subclasses define the `signature` field and three encodings:

    - `compute_hash_input`: the fixed-width, unprefixed byte stream that is
      hashed and signed.
    - `serialize` / `deserialize`: the wire form, with varint integers and
      length prefixes.

    The two encodings are intentionally different. Signed digests depend on
    the hash input alone, so the wire form can never be substituted for it.
    """

    if TYPE_CHECKING:
        signature: Signature

    @property
    @abstractmethod
    def signing_key(self) -> PublicKey:
        """The public key whose private half must have produced `signature`."""
        ...

    @abstractmethod
    def compute_hash_input(self, stream: IO[bytes]) -> None:
        """
        Collect the data that makes up this record's hash.

        Args:
            stream: The stream where the hash input is appended.
        """
        ...

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """
        Serialize the record and write it to a binary stream.

        Args:
            stream: The stream to write the serialized data to.

        Returns:
            The number of bytes written.
        """
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes]) -> Self:
        """
        Deserialize a record from a binary stream.

        Reads only the bytes belonging to this record, leaving the stream
        positioned at whatever follows.

        Raises:
            UnderrunError: If the stream ends before a field is complete.
            FormatError: If the bytes do not describe this record.
        """
        ...

    def hash(self) -> Hash:
        """Return the content hash that `signature` is made over."""
        return hash_full(self)

    def verify(self) -> bool:
        """
        Verify `signature` against `signing_key` over the content hash.

        An invalid signature is an expected outcome when checking untrusted
        data, so this never raises for one.

        Returns:
            True if the signature is valid, False otherwise.
        """
        valid = self.signing_key.verify(self.signature, self.hash().data)
        if not valid:
            logger.debug(
                "%s signature rejected for key %s",
                type(self).__name__,
                self.signing_key.hex()[:16],
            )
        return valid

    def with_signature(self, signature: Signature) -> Self:
        """Return a copy of this record carrying `signature`."""
        return self.model_copy(update={"signature": Signature(signature)})

    def sign(self, key_pair: KeyPair) -> Self:
        """
        Return a copy of this record signed by `key_pair`.

        The caller is responsible for using the key that `signing_key`
        names; signing with any other key yields a record that fails
        `verify()`.
        """
        return self.with_signature(key_pair.sign(self.hash().data))

    def encode_bytes(self) -> bytes:
        """
        Serialize the record to a byte string.

        Returns:
            The serialized byte string.
        """
        with io.BytesIO() as stream:
            self.serialize(stream)
            return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Deserialize a byte string holding exactly one record.

        Raises:
            UnderrunError: If `data` is truncated.
            FormatError: If `data` is malformed or has trailing bytes.
        """
        with io.BytesIO(data) as stream:
            record = cls.deserialize(stream)
            trailing = len(data) - stream.tell()
        if trailing:
            raise FormatError(
                cls.__name__, f"{trailing} trailing bytes", offset=len(data) - trailing
            )
        return record
