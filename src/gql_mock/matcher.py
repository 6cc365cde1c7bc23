"""Lookup of prepared GraphQL responses for incoming requests."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from graphql import GraphQLError, parse, print_ast

from gql_client.payload import GraphQLRequestPayload


@dataclass(frozen=True)
class MockGraphQLResponse:
    """A prepared response, served when a request matches request."""

    request: GraphQLRequestPayload
    response: Any


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a lookup: the response body, or why nothing matched."""

    body: Optional[str] = None
    error: Optional[str] = None


class Matcher(ABC):
    """Finds the prepared response for a request payload."""

    @abstractmethod
    def match(self, payload: GraphQLRequestPayload) -> MatchResult: ...


def normalize_query(query: str) -> str:
    """
    Return the canonical printed form of a query.

    gql prints every document before sending it, so prepared queries are
    compared in the same form. Text that does not parse is only trimmed.
    """
    query = query.strip()
    if not query:
        return query
    try:
        return print_ast(parse(query))
    except GraphQLError:
        return query


def _same_value(v1: Any, v2: Any) -> bool:
    # true and 1 are different JSON values
    if isinstance(v1, bool) or isinstance(v2, bool):
        return type(v1) is type(v2) and v1 == v2
    if isinstance(v1, dict) and isinstance(v2, dict):
        return v1.keys() == v2.keys() and all(_same_value(v1[k], v2[k]) for k in v1)
    if isinstance(v1, list) and isinstance(v2, list):
        return len(v1) == len(v2) and all(_same_value(a, b) for a, b in zip(v1, v2))
    return v1 == v2


def variables_equal(v1: Any, v2: Any) -> bool:
    """Compare variables, then their JSON round-trip to ignore representation differences."""
    if _same_value(v1, v2):
        return True
    try:
        x1 = json.loads(json.dumps(v1, default=str))
        x2 = json.loads(json.dumps(v2, default=str))
    except (TypeError, ValueError):
        return False
    return _same_value(x1, x2)


class StrictMatcher(Matcher):
    """
    Match on query text and variables.

    Every prepared response is checked, when several match the last one is
    served.
    """

    def __init__(self, responses: Iterable[MockGraphQLResponse]):
        self.responses: Tuple[MockGraphQLResponse, ...] = tuple(
            MockGraphQLResponse(request=r.request.trimmed(), response=r.response)
            for r in responses
        )
        self._queries: Tuple[str, ...] = tuple(
            normalize_query(r.request.query) for r in self.responses
        )

    def match(self, payload: GraphQLRequestPayload) -> MatchResult:
        query = normalize_query(payload.query)
        matched: Optional[MockGraphQLResponse] = None
        for prepared_query, resp in zip(self._queries, self.responses):
            if prepared_query != query:
                continue
            if variables_equal(resp.request.variables, payload.variables):
                matched = resp

        if matched is None:
            return MatchResult(
                error=f"query not found in prepared responses: {list(self.responses)}"
            )
        if isinstance(matched.response, str):
            return MatchResult(body=matched.response)
        try:
            return MatchResult(body=json.dumps(matched.response))
        except (TypeError, ValueError) as e:
            return MatchResult(error=f"cannot encode prepared response: {e}")


class LooseMatcher(Matcher):
    """
    Match on operation name or query text, variables are ignored.

    Keys are tried in insertion order and the first hit is served.
    """

    def __init__(self, responses: Mapping[str, str]):
        self.responses: Tuple[Tuple[str, str], ...] = tuple(responses.items())
        self._keys: Tuple[Tuple[str, str], ...] = tuple(
            (key.strip(), normalize_query(key)) for key, _ in self.responses
        )

    def match(self, payload: GraphQLRequestPayload) -> MatchResult:
        operation_name = payload.operation_name.strip()
        query = normalize_query(payload.query)
        for (name_key, query_key), (_, resp) in zip(self._keys, self.responses):
            if (operation_name and name_key == operation_name) or query_key == query:
                return MatchResult(body=resp)

        prepared: List[str] = [key for key, _ in self.responses]
        return MatchResult(error=f"query not found in prepared responses: {prepared}")
