"""Mock GraphQL clients for testing code that depends on GraphQLClient."""

import logging
from typing import Any, Iterable, Mapping, Optional

from graphql import GraphQLError

from gql_client.client import GraphQLClient
from gql_client.config import Config
from gql_mock.adapter import MatchingHTTPAdapter, MockHTTPAdapter, new_mock_http_adapter
from gql_mock.envelope import encode_mock_graphql_response
from gql_mock.matcher import LooseMatcher, MockGraphQLResponse, StrictMatcher


def new_mock_client(
    adapter: MockHTTPAdapter,
    logger: Optional[logging.Logger] = None,
    config: Optional[Config] = None,
) -> GraphQLClient:
    """Create a GraphQLClient sending every request to adapter."""
    config = config or Config()
    return GraphQLClient(config.MOCK_ENDPOINT, adapter, logger=logger, config=config)


def new_mock_http_client(
    json_resp: str, status_code: int, logger: Optional[logging.Logger] = None
) -> GraphQLClient:
    """Create a client whose requests all get json_resp with status_code."""
    return new_mock_client(new_mock_http_adapter(json_resp, status_code), logger)


def new_mock_graphql_client(
    responses: Iterable[MockGraphQLResponse], logger: Optional[logging.Logger] = None
) -> GraphQLClient:
    """
    Create a client answering from prepared responses.

    A response is served when both its query and its variables match the
    request. Unmatched requests get a validation-failed GraphQL error.
    """
    return new_mock_client(MatchingHTTPAdapter(StrictMatcher(responses)), logger)


def new_mock_graphql_client_queries(
    responses: Mapping[str, str], logger: Optional[logging.Logger] = None
) -> GraphQLClient:
    """
    Create a client answering from a map of query to JSON response.

    Keys are matched against the operation name or the query text, without
    validating variables.
    """
    return new_mock_client(MatchingHTTPAdapter(LooseMatcher(responses)), logger)


def new_mock_graphql_client_single(
    data: Any, error: Optional[GraphQLError] = None, logger: Optional[logging.Logger] = None
) -> GraphQLClient:
    """Create a client with a static response, a str data is served as is."""
    if isinstance(data, str):
        json_resp = data
    else:
        json_resp = encode_mock_graphql_response(data, error)
    return new_mock_http_client(json_resp, 200, logger)
