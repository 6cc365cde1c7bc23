"""GraphQL client with debug logging of requests and responses."""

import json
import logging
from typing import Any, Dict, Optional

from gql import Client, gql
from requests.adapters import BaseAdapter

from gql_client.config import Config
from gql_client.construct import construct_mutation, construct_query, unwrap_variables
from gql_client.interface import GraphQLClientInterface, Options, Selection
from gql_client.transport import AdapterHTTPTransport

DEFAULT_LOGGER_NAME = __name__
TRANSPORT_LOGGER_NAME = "gql.transport.requests"


class GraphQLClient(GraphQLClientInterface):
    """
    Wraps a gql Client and logs every request when the logger is enabled for DEBUG.

    The logger defaults to logging.getLogger("gql_client.client"). With DEBUG
    disabled no log record is emitted and no log fields are collected.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        adapter: Optional[BaseAdapter] = None,
        logger: Optional[logging.Logger] = None,
        config: Optional[Config] = None,
        client: Optional[Client] = None,
    ):
        if client is None:
            config = config or Config()
            url = url or config.GRAPHQL_ENDPOINT
            transport = AdapterHTTPTransport(
                url=url, adapter=adapter, timeout=config.REQUEST_TIMEOUT
            )
            client = Client(transport=transport, fetch_schema_from_transport=False)
        self.endpoint = url or getattr(client.transport, "url", None)
        self.client = client
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    @classmethod
    def from_client(
        cls, client: Client, logger: Optional[logging.Logger] = None
    ) -> "GraphQLClient":
        """Wrap an already configured gql Client."""
        return cls(logger=logger, client=client)

    def with_logger(self, logger: logging.Logger) -> "GraphQLClient":
        """Return a new client sharing the same gql Client, logging to logger."""
        return GraphQLClient.from_client(self.client, logger)

    def set_debug(self, enabled: bool) -> None:
        """Toggle debug logging of this client and of the gql requests transport."""
        self.logger.setLevel(logging.DEBUG if enabled else logging.INFO)
        logging.getLogger(TRANSPORT_LOGGER_NAME).setLevel(
            logging.INFO if enabled else logging.WARNING
        )

    def query(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query built from a selection.

        Args:
            selection (Selection): Nested mapping of fields, or query text.
            variables (Optional[Dict[str, Any]]): Variables for the query.
            options (Optional[Options]): Operation name and extra headers.

        Returns:
            Dict[str, Any]: The data of the response.
        """
        query = construct_query(selection, variables, options)
        return self._exec(query, variables, "Query", options)

    def query_raw(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> bytes:
        """Execute a GraphQL query, return the response data as raw JSON bytes."""
        query = construct_query(selection, variables, options)
        return self._exec_raw(query, variables, "QueryRaw", options)

    def mutate(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Dict[str, Any]:
        """Execute a GraphQL mutation built from a selection."""
        query = construct_mutation(selection, variables, options)
        return self._exec(query, variables, "Mutate", options)

    def mutate_raw(
        self,
        selection: Selection,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> bytes:
        query = construct_mutation(selection, variables, options)
        return self._exec_raw(query, variables, "MutateRaw", options)

    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Dict[str, Any]:
        """Execute a GraphQL request from a raw query string."""
        return self._exec(query, variables, "Exec", options)

    def execute_raw(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> bytes:
        return self._exec_raw(query, variables, "ExecRaw", options)

    def _exec(
        self,
        query: str,
        variables: Optional[Dict[str, Any]],
        msg: str,
        options: Optional[Options],
    ) -> Dict[str, Any]:
        log_fields = self._request_log_fields(query, variables)
        try:
            result = self._dispatch(query, variables, options)
        except Exception as e:
            self._log_error(msg, log_fields, e)
            raise

        if log_fields is not None:
            log_fields["response"] = result
            self.logger.debug(f"{msg} response: {result}", extra=log_fields)
        return result

    def _exec_raw(
        self,
        query: str,
        variables: Optional[Dict[str, Any]],
        msg: str,
        options: Optional[Options],
    ) -> bytes:
        log_fields = self._request_log_fields(query, variables)
        try:
            raw = json.dumps(self._dispatch(query, variables, options)).encode("utf-8")
        except Exception as e:
            self._log_error(msg, log_fields, e)
            raise

        if log_fields is not None:
            log_fields["response"] = raw.decode("utf-8")
            self.logger.debug(f"{msg} response: {log_fields['response']}", extra=log_fields)
        return raw

    def _request_log_fields(
        self, query: str, variables: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return None
        return {"variables": variables, "query": query}

    def _log_error(
        self, msg: str, log_fields: Optional[Dict[str, Any]], error: Exception
    ) -> None:
        if log_fields is None:
            return
        log_fields["error"] = error
        self.logger.error(f"{msg} failed: {error}", extra=log_fields)

    def _dispatch(
        self,
        query: str,
        variables: Optional[Dict[str, Any]],
        options: Optional[Options],
    ) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if options and options.headers:
            headers = dict(getattr(self.client.transport, "headers", None) or {})
            headers.update(options.headers)
            kwargs["extra_args"] = {"headers": headers}

        return self.client.execute(
            gql(query),
            variable_values=unwrap_variables(variables) or None,
            operation_name=(options.operation_name if options else None) or None,
            parse_result=False,
            **kwargs,
        )
