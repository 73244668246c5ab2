"""Key sets: ordered, identifier-indexed collections of deterministic AEAD keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from .constants import NON_RAW_PREFIX_SIZE, RAW_PREFIX
from .crypto.format import output_prefix
from .crypto.utils import require_bytes
from .errors import ConfigError
from .types import DeterministicAead, OutputPrefixType


@dataclass(frozen=True)
class KeyEntry:
    """One key of a key set.

    Attributes:
        primitive: The deterministic AEAD implementation for this key.
        identifier: The prefix this key stamps on its ciphertexts, empty for raw keys.
        key_id: The numeric key id, when known.
        output_prefix_type: How ``identifier`` was derived from ``key_id``, when known.
    """

    primitive: DeterministicAead = field(repr=False)
    identifier: bytes = RAW_PREFIX
    key_id: int | None = None
    output_prefix_type: OutputPrefixType | None = None

    @property
    def is_raw(self) -> bool:
        """Whether this key stamps no identifier on its ciphertexts."""
        return self.identifier == RAW_PREFIX

    @classmethod
    def from_key_id(
        cls,
        primitive: DeterministicAead,
        key_id: int,
        prefix_type: OutputPrefixType = OutputPrefixType.TINK,
    ) -> KeyEntry:
        """Create an entry whose identifier is derived from a key id.

        Args:
            primitive: The deterministic AEAD implementation.
            key_id: The key id, an unsigned 32-bit integer.
            prefix_type: The output prefix type of the key.

        Returns:
            A new KeyEntry.

        Raises:
            ValueError: If the key id is out of range.
        """
        prefix_type = OutputPrefixType(prefix_type)
        return cls(
            primitive=primitive,
            identifier=output_prefix(key_id, prefix_type),
            key_id=key_id,
            output_prefix_type=prefix_type,
        )


# Accepted build inputs: an entry, (primitive, identifier) or (primitive, identifier, is_primary)
EntryInput = Union[KeyEntry, Sequence[Any]]


class KeySet:
    """Immutable, ordered collection of key entries with exactly one primary.

    Entries sharing an identifier are kept together in insertion order, and
    raw entries are kept in a separate list, also in insertion order. Both
    orders are the order in which keys are tried on decryption.

    Use :meth:`build` to construct a key set.
    """

    __slots__ = ("_entries", "_primary", "_by_identifier", "_raw", "_prefix_size")

    def __init__(
        self,
        entries: tuple[KeyEntry, ...],
        primary: KeyEntry,
        by_identifier: Mapping[bytes, tuple[KeyEntry, ...]],
        raw: tuple[KeyEntry, ...],
        prefix_size: int,
    ) -> None:
        """Create a key set from already-indexed entries.

        Raises:
            ConfigError: If the primary, the identifier index or the raw list
                do not match ``entries``.
        """
        entries = tuple(entries)
        raw = tuple(raw)
        by_identifier = MappingProxyType(
            {require_bytes(k): tuple(v) for k, v in by_identifier.items()}
        )
        _validate_prefix_size(prefix_size)
        _validate_index(entries, primary, by_identifier, raw)

        self._entries = entries
        self._primary = primary
        self._by_identifier = by_identifier
        self._raw = raw
        self._prefix_size = prefix_size

    @classmethod
    def build(
        cls,
        entries: Iterable[EntryInput],
        primary_index: int | None = None,
        *,
        prefix_size: int = NON_RAW_PREFIX_SIZE,
    ) -> KeySet:
        """Build and validate a key set.

        The primary is designated either by ``primary_index`` or by a single
        tuple entry carrying ``is_primary=True``. Both may be given if they
        agree.

        Args:
            entries: KeyEntry objects or ``(primitive, identifier[, is_primary])`` tuples.
            primary_index: Position of the primary entry in ``entries``.
            prefix_size: Length in bytes of every non-raw identifier.

        Returns:
            The validated key set.

        Raises:
            ConfigError: If the entries or the primary designation are invalid.
        """
        _validate_prefix_size(prefix_size)

        parsed: list[KeyEntry] = []
        flagged: list[int] = []
        for index, item in enumerate(entries):
            entry, is_primary = _parse_entry(index, item)
            _validate_entry(index, entry, prefix_size)
            parsed.append(entry)
            if is_primary:
                flagged.append(index)

        if not parsed:
            raise ConfigError("Key set must contain at least one entry")

        index = _resolve_primary_index(primary_index, flagged, len(parsed))

        by_identifier: dict[bytes, list[KeyEntry]] = {}
        raw: list[KeyEntry] = []
        for entry in parsed:
            if entry.is_raw:
                raw.append(entry)
            else:
                by_identifier.setdefault(entry.identifier, []).append(entry)

        return cls(
            entries=tuple(parsed),
            primary=parsed[index],
            by_identifier=by_identifier,
            raw=tuple(raw),
            prefix_size=prefix_size,
        )

    @property
    def prefix_size(self) -> int:
        """Length in bytes of every non-raw identifier in this key set."""
        return self._prefix_size

    def primary(self) -> KeyEntry:
        """Return the primary entry, used for all encryption."""
        return self._primary

    def lookup(self, identifier: bytes) -> tuple[KeyEntry, ...]:
        """Return the entries with the given identifier, in insertion order.

        Args:
            identifier: A non-raw identifier.

        Returns:
            The matching entries, empty if there are none.

        Raises:
            TypeError: If ``identifier`` is not bytes-like.
        """
        return self._by_identifier.get(require_bytes(identifier), ())

    def raw_entries(self) -> tuple[KeyEntry, ...]:
        """Return all raw entries, in insertion order."""
        return self._raw

    def entries(self) -> tuple[KeyEntry, ...]:
        """Return all entries, in insertion order."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[KeyEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return (
            f"KeySet(entries={len(self._entries)}, raw={len(self._raw)}, "
            f"prefix_size={self._prefix_size})"
        )


def _validate_prefix_size(prefix_size: int) -> None:
    """Validate the configured identifier length."""
    if isinstance(prefix_size, bool) or not isinstance(prefix_size, int) or prefix_size <= 0:
        raise ConfigError(f"Prefix size must be a positive integer, got {prefix_size!r}")


def _parse_entry(index: int, item: EntryInput) -> tuple[KeyEntry, bool]:
    """Turn one build input into an entry and its primary flag."""
    if isinstance(item, KeyEntry):
        return item, False

    if isinstance(item, (str, bytes, bytearray, memoryview)) or not isinstance(item, Sequence):
        raise ConfigError(f"Entry {index}: expected KeyEntry or tuple, got {type(item).__name__}")
    if len(item) == 2:
        primitive, identifier = item
        is_primary = False
    elif len(item) == 3:
        primitive, identifier, is_primary = item
    else:
        raise ConfigError(
            f"Entry {index}: expected (primitive, identifier[, is_primary]), got {len(item)} items"
        )

    if identifier is None:
        identifier = RAW_PREFIX
    if not isinstance(identifier, (bytes, bytearray, memoryview)):
        raise ConfigError(
            f"Entry {index}: identifier must be bytes, got {type(identifier).__name__}"
        )
    return KeyEntry(primitive=primitive, identifier=bytes(identifier)), bool(is_primary)


def _validate_entry(index: int, entry: KeyEntry, prefix_size: int) -> None:
    """Validate an entry's primitive and identifier length."""
    if not isinstance(entry.primitive, DeterministicAead):
        raise ConfigError(
            f"Entry {index}: primitive {type(entry.primitive).__name__} "
            "does not implement encrypt/decrypt"
        )
    if not isinstance(entry.identifier, bytes):
        raise ConfigError(
            f"Entry {index}: identifier must be bytes, got {type(entry.identifier).__name__}"
        )
    if not entry.is_raw and len(entry.identifier) != prefix_size:
        raise ConfigError(
            f"Entry {index}: invalid identifier length {len(entry.identifier)}, "
            f"expected {prefix_size} or 0 for raw keys"
        )


def _resolve_primary_index(primary_index: int | None, flagged: list[int], count: int) -> int:
    """Reconcile the explicit primary index with per-entry primary flags."""
    if len(flagged) > 1:
        raise ConfigError(f"Key set has {len(flagged)} primary designations, expected exactly one")

    if primary_index is None:
        if not flagged:
            raise ConfigError("Key set has no primary")
        return flagged[0]

    if isinstance(primary_index, bool) or not isinstance(primary_index, int):
        raise ConfigError(f"Primary index must be an integer, got {type(primary_index).__name__}")
    if not 0 <= primary_index < count:
        raise ConfigError(f"Primary index {primary_index} out of range for {count} entries")
    if flagged and flagged[0] != primary_index:
        raise ConfigError(
            f"Conflicting primary designations: index {primary_index} and entry {flagged[0]}"
        )
    return primary_index


def _same_entries(a: Sequence[KeyEntry], b: Sequence[KeyEntry]) -> bool:
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))


def _validate_index(
    entries: tuple[KeyEntry, ...],
    primary: KeyEntry,
    by_identifier: Mapping[bytes, tuple[KeyEntry, ...]],
    raw: tuple[KeyEntry, ...],
) -> None:
    """Check the primary, the identifier index and the raw list against the entries.

    Every entry must appear exactly once, either in its identifier's bucket or
    in the raw list, in insertion order.
    """
    if not entries:
        raise ConfigError("Key set must contain at least one entry")
    if not any(entry is primary for entry in entries):
        raise ConfigError("Primary entry is not part of the key set")

    expected_raw = [entry for entry in entries if entry.is_raw]
    if not _same_entries(raw, expected_raw):
        raise ConfigError("Raw entry list does not match the key set entries")

    expected_index: dict[bytes, list[KeyEntry]] = {}
    for entry in entries:
        if not entry.is_raw:
            expected_index.setdefault(entry.identifier, []).append(entry)
    if set(by_identifier) != set(expected_index) or not all(
        _same_entries(by_identifier[k], v) for k, v in expected_index.items()
    ):
        raise ConfigError("Identifier index does not match the key set entries")
