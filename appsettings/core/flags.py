"""Behaviour toggles shared by every load/save/delete call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocFlags:
    """Independent switches tweaking document persistence.

    Attributes:
        write_portable: Write next to the running program (working directory)
            instead of the standard writable directory. Reads still search the
            standard directories first.
        write_minimal: Omit fields equal to the record type's default on save.
        dont_write_nonexistent: When load finds no file, return the default
            record without creating one on disk.
    """

    write_portable: bool = False
    write_minimal: bool = False
    dont_write_nonexistent: bool = False

    def __or__(self, other: "DocFlags") -> "DocFlags":
        if not isinstance(other, DocFlags):
            return NotImplemented
        return DocFlags(
            write_portable=self.write_portable or other.write_portable,
            write_minimal=self.write_minimal or other.write_minimal,
            dont_write_nonexistent=self.dont_write_nonexistent or other.dont_write_nonexistent,
        )


NONE = DocFlags()
WRITE_PORTABLE = DocFlags(write_portable=True)
WRITE_MINIMAL = DocFlags(write_minimal=True)
DONT_WRITE_NONEXISTENT = DocFlags(dont_write_nonexistent=True)


def coerce_flags(flags: DocFlags | None) -> DocFlags:
    return NONE if flags is None else flags
