"""requests-based gql transport with a pluggable HTTP adapter."""

from typing import Any, Optional

from gql.transport.requests import RequestsHTTPTransport
from requests.adapters import BaseAdapter


class AdapterHTTPTransport(RequestsHTTPTransport):
    """
    RequestsHTTPTransport whose session sends requests through a given adapter.

    gql opens a new requests.Session on every connect, the adapter is mounted
    on each of them for both http:// and https:// URLs. Without an adapter the
    transport behaves exactly like RequestsHTTPTransport.
    """

    def __init__(self, url: str, adapter: Optional[BaseAdapter] = None, **kwargs: Any):
        super().__init__(url=url, **kwargs)
        self.adapter = adapter

    def connect(self):
        super().connect()
        if self.adapter is not None:
            for prefix in ("http://", "https://"):
                self.session.mount(prefix, self.adapter)
