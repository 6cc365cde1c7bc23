"""Tests for the mock GraphQL clients."""

import json

import pytest
from gql.transport.exceptions import TransportQueryError, TransportServerError
from graphql import GraphQLError

from gql_client.client import GraphQLClient
from gql_client.construct import Var
from gql_client.interface import Options
from gql_client.payload import GraphQLRequestPayload
from gql_mock.envelope import (
    encode_mock_graphql_response,
    new_mock_graphql_affected_rows_response,
)
from gql_mock.matcher import MockGraphQLResponse
from gql_mock.mock import (
    new_mock_graphql_client,
    new_mock_graphql_client_queries,
    new_mock_graphql_client_single,
    new_mock_http_client,
)

USER_QUERY = {"user": {"id": None}}


def test_new_mock_graphql_client_queries():
    client = new_mock_graphql_client_queries(
        {
            "{user{id}}": encode_mock_graphql_response({"user": {"id": 1}}, None),
            "query GetUser($foo:String!){user{id}}": encode_mock_graphql_response(
                {"user": {"id": 2}}, None
            ),
        }
    )

    assert client.query(USER_QUERY)["user"]["id"] == 1

    result = client.query(USER_QUERY, {"foo": "bar"}, Options(operation_name="GetUser"))
    assert result["user"]["id"] == 2

    with pytest.raises(TransportQueryError, match="validation-failed"):
        client.query(
            USER_QUERY, {"foo": "bar"}, Options(operation_name="GetNotExistUser")
        )


def test_new_mock_graphql_client_queries_by_operation_name():
    client = new_mock_graphql_client_queries(
        {"GetUser": encode_mock_graphql_response({"user": {"id": 5}})}
    )
    result = client.query(USER_QUERY, None, Options(operation_name="GetUser"))
    assert result == {"user": {"id": 5}}


def test_new_mock_graphql_client_single():
    client_str = new_mock_graphql_client_single('{"data": {"user": {"id": 1}}}', None)
    assert client_str.query(USER_QUERY)["user"]["id"] == 1

    client_obj = new_mock_graphql_client_single({"user": {"id": 2}}, None)
    assert client_obj.query(USER_QUERY)["user"]["id"] == 2


def test_new_mock_graphql_client_single_with_error():
    client = new_mock_graphql_client_single(
        None, GraphQLError("permission denied", extensions={"code": "access-denied"})
    )
    with pytest.raises(TransportQueryError, match="access-denied") as exc_info:
        client.query(USER_QUERY)
    assert exc_info.value.errors[0]["message"] == "permission denied"


def test_new_mock_graphql_affected_rows_response():
    client = new_mock_graphql_client_single(
        new_mock_graphql_affected_rows_response("insert_user", 1), None
    )
    result = client.query({"insert_user(objects: $objects)": {"affected_rows": None}})
    assert result["insert_user"]["affected_rows"] == 1

    result = client.mutate(
        {"insert_user(objects: $objects)": {"affected_rows": None}},
        {"objects": Var([{"name": "a"}], "[user_insert_input!]!")},
    )
    assert result == {"insert_user": {"affected_rows": 1}}


def test_new_mock_graphql_client():
    client = new_mock_graphql_client(
        [
            MockGraphQLResponse(
                request=GraphQLRequestPayload(query="{user{id}}"),
                response={"data": {"user": {"id": 1}}},
            ),
            MockGraphQLResponse(
                request=GraphQLRequestPayload(
                    query="query GetUser($foo:String!){user{id}}",
                    variables={"foo": "bar"},
                ),
                response={"data": {"user": {"id": 2}}},
            ),
        ]
    )

    assert client.query(USER_QUERY)["user"]["id"] == 1

    with pytest.raises(TransportQueryError, match="validation-failed"):
        client.query(USER_QUERY, None, Options(operation_name="GetUser"))

    result = client.query(USER_QUERY, {"foo": "bar"}, Options(operation_name="GetUser"))
    assert result["user"]["id"] == 2

    with pytest.raises(TransportQueryError, match="validation-failed"):
        client.query(
            USER_QUERY, {"foo": "bar"}, Options(operation_name="GetNotExistUser")
        )


def test_new_mock_graphql_client_tolerates_variable_representation():
    client = new_mock_graphql_client(
        [
            MockGraphQLResponse(
                request=GraphQLRequestPayload(
                    query="query($ids:[Int!]!){users(ids: $ids){id}}",
                    variables={"ids": (1, 2)},
                ),
                response={"data": {"users": [{"id": 1}, {"id": 2}]}},
            )
        ]
    )
    result = client.execute(
        "query ($ids: [Int!]!) { users(ids: $ids) { id } }", {"ids": [1, 2]}
    )
    assert result == {"users": [{"id": 1}, {"id": 2}]}


def test_raw_variants_return_response_data():
    client = new_mock_graphql_client_single({"user": {"id": 7}})

    assert json.loads(client.query_raw(USER_QUERY)) == {"user": {"id": 7}}
    assert json.loads(client.mutate_raw({"delete_user": {"affected_rows": None}})) == {
        "user": {"id": 7}
    }
    assert json.loads(client.execute_raw("{user{id}}")) == {"user": {"id": 7}}


def test_new_mock_http_client_server_error():
    client = new_mock_http_client("internal error", 500)
    with pytest.raises(TransportServerError) as exc_info:
        client.query(USER_QUERY)
    assert exc_info.value.code == 500


def test_mock_clients_are_logging_clients():
    client = new_mock_http_client("{}", 200)
    assert isinstance(client, GraphQLClient)
    assert client.endpoint == "http://graphql.mock/v1/graphql"
