"""requests adapters answering GraphQL requests without network I/O."""

import logging
from http import HTTPStatus
from typing import Any, Callable, Optional, TypeAlias

import requests
from requests.adapters import BaseAdapter

from gql_client.config import Config
from gql_client.payload import GraphQLRequestPayload
from gql_mock.envelope import encode_mock_graphql_response, validation_error
from gql_mock.matcher import Matcher

MockSend: TypeAlias = Callable[[requests.PreparedRequest], requests.Response]

logger = logging.getLogger(__name__)


class MockHTTPAdapter(BaseAdapter):
    """Adapter delegating every send to mock_send."""

    def __init__(self, mock_send: MockSend):
        super().__init__()
        self.mock_send = mock_send

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        return self.mock_send(request)

    def close(self) -> None:
        pass


def build_response(
    request: requests.PreparedRequest, body: str, status_code: int
) -> requests.Response:
    """Build a JSON requests.Response for request."""
    response = requests.Response()
    response.status_code = status_code
    try:
        response.reason = HTTPStatus(status_code).phrase
    except ValueError:
        response.reason = ""
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    response._content = body.encode("utf-8")
    response.url = request.url
    response.request = request
    return response


def new_mock_http_adapter(json_resp: str, status_code: int) -> MockHTTPAdapter:
    """Create an adapter that always answers json_resp with status_code."""

    def mock_send(request: requests.PreparedRequest) -> requests.Response:
        return build_response(request, json_resp, status_code)

    return MockHTTPAdapter(mock_send)


class MatchingHTTPAdapter(MockHTTPAdapter):
    """
    Adapter answering each request with the response found by a matcher.

    Requests that match nothing, or whose body cannot be read, are answered
    with a GraphQL validation error instead of failing the transport call.
    """

    def __init__(self, matcher: Matcher, config: Optional[Config] = None):
        super().__init__(self._send)
        self.matcher = matcher
        self.config = config or Config()

    def _send(self, request: requests.PreparedRequest) -> requests.Response:
        body = request.body
        if body is None:
            return self.validation_error_response(
                request, "request body is empty", "<empty body>"
            )
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                return self.validation_error_response(request, str(e), repr(request.body))
        elif not isinstance(body, str):
            return self.validation_error_response(
                request, f"unreadable request body of type {type(body).__name__}", repr(body)
            )

        try:
            payload = GraphQLRequestPayload.from_json(body)
        except ValueError as e:
            return self.validation_error_response(request, str(e), body)

        result = self.matcher.match(payload)
        if result.error is not None:
            logger.debug(f"No prepared response for request: {body}")
            return self.validation_error_response(request, result.error, body)
        return build_response(request, result.body, 200)

    def validation_error_response(
        self, request: requests.PreparedRequest, message: str, request_body: str
    ) -> requests.Response:
        body = encode_mock_graphql_response(
            None, validation_error(message, request_body, self.config)
        )
        return build_response(request, body, self.config.VALIDATION_ERROR_STATUS)
