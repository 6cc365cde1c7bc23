"""GraphQL-over-HTTP request payload."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class GraphQLRequestPayload:
    """The {query, operationName, variables} body of a GraphQL request."""

    query: str = ""
    operation_name: str = ""
    variables: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "GraphQLRequestPayload":
        """
        Parse a request body.

        Raises:
            ValueError: If the body is not a JSON object with the expected members.
        """
        raw = json.loads(body)
        if not isinstance(raw, dict):
            raise ValueError(f"GraphQL request body must be a JSON object, got {raw!r}")

        variables = raw.get("variables") or {}
        if not isinstance(variables, dict):
            raise ValueError(f"GraphQL variables must be an object, got {variables!r}")

        for member in ("query", "operationName"):
            value = raw.get(member)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"GraphQL {member} must be a string, got {value!r}")

        return cls(
            query=raw.get("query") or "",
            operation_name=raw.get("operationName") or "",
            variables=variables,
        )

    def trimmed(self) -> "GraphQLRequestPayload":
        return GraphQLRequestPayload(
            query=self.query.strip(),
            operation_name=self.operation_name.strip(),
            variables=self.variables or {},
        )
