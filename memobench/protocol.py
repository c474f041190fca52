from abc import ABC, abstractmethod
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from memobench.fibonacci import MemoizedFibonacci, NaiveFibonacci


class ProtocolRecord(BaseModel):
    """Payload handed to a protocol transformer.

    Built either with `data` or with the `interesting_data` key of the
    benchmark payloads.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: int = Field(..., description="Protocol version, used as Fibonacci index")
    data: str = Field(..., alias="interesting_data", description="Payload data")


def checksum(data: str) -> int:
    """Sum of the unicode code points of the characters of data"""
    return sum(ord(char) for char in data)


def _as_record(record: ProtocolRecord | Mapping[str, Any]) -> ProtocolRecord:
    if isinstance(record, ProtocolRecord):
        return record
    return ProtocolRecord.model_validate(record)


class _ProtocolTransformer(ABC):
    """Reverse the payload data, after computing its metadata header.

    The header is kept on `header` but is not part of the transformed output.
    """

    def __init__(self, record: ProtocolRecord | Mapping[str, Any]):
        self.record = _as_record(record)
        self.output: str = ""
        self.header: str | None = None

    def transform(self) -> str:
        self._add_metadata()
        self.output += self.record.data[::-1]
        return self.output

    def _add_metadata(self) -> None:
        version_info = self._version_info()
        length_info = self._length_info()
        self.header = f"Version: {version_info} Length: {length_info} Data: "

    @abstractmethod
    def _version_info(self) -> int: ...

    @abstractmethod
    def _length_info(self) -> int: ...


class MemoizedProtocolTransformer(_ProtocolTransformer):
    def _version_info(self) -> int:
        return MemoizedFibonacci().fib(self.record.version)

    def _length_info(self) -> int:
        return checksum(self.record.data)


class NaiveProtocolTransformer(_ProtocolTransformer):
    def _version_info(self) -> int:
        return NaiveFibonacci().fib(self.record.version)

    def _length_info(self) -> int:
        total = 0
        for char in self.record.data:
            total += ord(char)
        return total


def transform(
    record: ProtocolRecord | Mapping[str, Any], memoized: bool = True
) -> str:
    """Transform a record with a fresh transformer"""
    if memoized:
        return MemoizedProtocolTransformer(record).transform()
    return NaiveProtocolTransformer(record).transform()
