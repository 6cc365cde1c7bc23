"""Client interface so the GraphQL implementation can be replaced by something else."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, TypeAlias, Union

Selection: TypeAlias = Union[str, Mapping[str, Any]]


@dataclass(frozen=True)
class Options:
    """Per-call request options."""

    operation_name: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


class GraphQLClientInterface(ABC):
    """Operations of a GraphQL client, so implementations can be swapped."""

    @abstractmethod
    def query(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Dict[str, Any]: ...

    @abstractmethod
    def query_raw(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> bytes: ...

    @abstractmethod
    def mutate(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Dict[str, Any]: ...

    @abstractmethod
    def mutate_raw(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> bytes: ...

    @abstractmethod
    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Dict[str, Any]: ...

    @abstractmethod
    def execute_raw(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> bytes: ...
