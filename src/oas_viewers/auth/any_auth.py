"""The AnyAuth viewer: one viewer accepting the credentials of every protocol.

Each protocol contributes one optional argument whose input type is built
from the protocol's credential schema. Arguments are sorted by name since a
mixed-protocol viewer has no declared order of its own.
"""

from dataclasses import dataclass
from typing import Any

from graphql import GraphQLArgument, GraphQLField, GraphQLObjectType

from oas_viewers.auth.context import security_context
from oas_viewers.auth.viewer import Viewer
from oas_viewers.schema.input_types import build_input_type, register_data_definition
from oas_viewers.schema.naming import sanitize_and_store, sort_by_key

ANY_AUTH_TYPE_DESCRIPTION = "Warning: Not every request will work with this viewer type"
ANY_AUTH_DESCRIPTION = "A viewer that wraps operations for all available authentication mechanisms"


@dataclass(frozen=True)
class AnyAuthResolver:
    """Resolver of the AnyAuth viewer; args are already keyed by protocol."""

    def __call__(self, root: Any, info: Any, **args) -> dict:
        return security_context(args)


def build_any_auth_viewer(
    name: str,
    fields: dict[str, GraphQLField],
    data,
) -> Viewer:
    """Build the AnyAuth viewer wrapping the fields of every protocol."""
    args = {}
    for protocol_name, scheme in data.security.items():
        # http sub-schemes without a credential shape have nothing to ask for
        if scheme.credential_schema is None:
            continue

        definition = register_data_definition(protocol_name, scheme.credential_schema, True, data)
        # credentials are always input, also on the query root
        input_type = build_input_type(definition, data.definitions)
        args[sanitize_and_store(protocol_name, data.sane_map)] = GraphQLArgument(input_type)

    wrapped = dict(fields)
    return Viewer(
        object_type=GraphQLObjectType(name=name, fields=lambda: wrapped, description=ANY_AUTH_TYPE_DESCRIPTION),
        resolve=AnyAuthResolver(),
        args=sort_by_key(args),
        description=ANY_AUTH_DESCRIPTION,
    )
