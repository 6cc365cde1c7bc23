"""Encoding of mock GraphQL response envelopes."""

import json
from typing import Any, Dict, Optional

from graphql import GraphQLError

from gql_client.config import Config


class MockEncodeError(RuntimeError):
    """Exception raised when mock response data cannot be serialized."""

    pass


def encode_mock_graphql_response(data: Any = None, error: Optional[GraphQLError] = None) -> str:
    """
    Encode data and an optional error into a GraphQL response payload.

    The "data" member is present only when data is not None and "errors" only
    when an error is given.

    Raises:
        MockEncodeError: If data is not JSON serializable. This is a mistake
            in the test setup, not something to recover from.
    """
    resp: Dict[str, Any] = {}
    if data is not None:
        resp["data"] = data
    if error is not None:
        resp["errors"] = [error.formatted]

    try:
        return json.dumps(resp)
    except (TypeError, ValueError) as e:
        raise MockEncodeError(f"Cannot encode mock GraphQL response: {e}") from e


def new_mock_graphql_affected_rows_response(mutation_name: str, affected_rows: int) -> str:
    """Return the JSON response of a mutation reporting affected_rows."""
    return encode_mock_graphql_response(
        {mutation_name: {"affected_rows": affected_rows}}
    )


def validation_error(
    message: str, request_body: str, config: Optional[Config] = None
) -> GraphQLError:
    config = config or Config()
    return GraphQLError(
        message,
        extensions={
            "code": config.VALIDATION_ERROR_CODE,
            "path": config.VALIDATION_ERROR_PATH,
            "request_body": request_body,
        },
    )
