"""Build GraphQL query and mutation text from a selection and its variables."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from gql_client.interface import Options, Selection


class QueryConstructionError(ValueError):
    """Exception raised when a selection cannot be turned into query text."""

    pass


@dataclass(frozen=True)
class Var:
    """A variable value with an explicit GraphQL type, e.g. Var(uuid, "uuid!")."""

    value: Any
    type_name: str


def construct_query(
    selection: Selection,
    variables: Optional[Dict[str, Any]] = None,
    options: Optional[Options] = None,
) -> str:
    """
    Construct the text of a query operation.

    Args:
        selection (Selection): Either a nested mapping of fields or a string.
            A string starting with "{" is a selection set, any other string
            is used as a complete document.
        variables (Optional[Dict[str, Any]]): Variables of the operation.
        options (Optional[Options]): Per-call options, the operation name is
            taken from here.

    Returns:
        str: The query text, e.g. "query GetUser($foo:String!){user{id}}".
    """
    return _construct("query", selection, variables, options)


def construct_mutation(
    selection: Selection,
    variables: Optional[Dict[str, Any]] = None,
    options: Optional[Options] = None,
) -> str:
    """Construct the text of a mutation operation."""
    return _construct("mutation", selection, variables, options)


def unwrap_variables(variables: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Replace Var wrappers by their plain values."""
    if not variables:
        return {}
    return {
        name: value.value if isinstance(value, Var) else value
        for name, value in variables.items()
    }


def _construct(
    operation: str,
    selection: Selection,
    variables: Optional[Dict[str, Any]],
    options: Optional[Options],
) -> str:
    if isinstance(selection, str):
        text = selection.strip()
        if not text:
            raise QueryConstructionError(f"Empty {operation} selection")
        if not text.startswith("{"):
            return text
        selection_set = text
    elif isinstance(selection, Mapping):
        selection_set = _render_selection_set(selection)
    else:
        raise QueryConstructionError(
            f"Unsupported {operation} selection type: {type(selection).__name__}"
        )

    operation_name = (options.operation_name or "").strip() if options else ""
    arguments = _render_variable_definitions(variables)

    if operation == "query" and not operation_name and not arguments:
        return selection_set
    if operation_name:
        return f"{operation} {operation_name}{arguments}{selection_set}"
    return f"{operation}{arguments}{selection_set}"


def _render_selection_set(selection: Mapping[str, Any]) -> str:
    if not selection:
        raise QueryConstructionError("Selection set must contain at least one field")

    fields: List[str] = []
    for field, sub_selection in selection.items():
        if not isinstance(field, str) or not field.strip():
            raise QueryConstructionError(f"Invalid field name: {field!r}")
        if sub_selection is None or sub_selection is True:
            fields.append(field.strip())
        elif isinstance(sub_selection, Mapping):
            fields.append(field.strip() + _render_selection_set(sub_selection))
        else:
            raise QueryConstructionError(
                f"Invalid selection for field {field!r}: {sub_selection!r}"
            )
    return "{" + ",".join(fields) + "}"


def _render_variable_definitions(variables: Optional[Dict[str, Any]]) -> str:
    if not variables:
        return ""
    definitions = [
        f"${name}:{_infer_type(name, variables[name])}" for name in sorted(variables)
    ]
    return "(" + ",".join(definitions) + ")"


def _infer_type(name: str, value: Any) -> str:
    if isinstance(value, Var):
        return value.type_name
    # bool before int, bool is a subclass of int
    if isinstance(value, bool):
        return "Boolean!"
    if isinstance(value, int):
        return "Int!"
    if isinstance(value, float):
        return "Float!"
    if isinstance(value, str):
        return "String!"
    if isinstance(value, (list, tuple)):
        if not value:
            raise QueryConstructionError(
                f"Cannot infer the item type of empty list variable ${name}, use Var"
            )
        return f"[{_infer_type(name, value[0])}]!"
    raise QueryConstructionError(
        f"Cannot infer the GraphQL type of variable ${name} "
        f"({type(value).__name__}), use Var"
    )
