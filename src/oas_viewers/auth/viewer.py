"""Viewers for a single security protocol.

A viewer is a root field taking the protocol's credentials as arguments.
Its resolver stores them in the security context, and the object type it
returns wraps every operation that accepts the protocol.
"""

from dataclasses import dataclass
from typing import Any, Callable

from graphql import GraphQLArgument, GraphQLField, GraphQLNonNull, GraphQLObjectType, GraphQLString

from oas_viewers.auth.context import security_context
from oas_viewers.parser.base import ApiDocument
from oas_viewers.schema.naming import sanitize_and_store


@dataclass(frozen=True)
class Viewer:
    object_type: GraphQLObjectType
    resolve: Callable[..., dict]
    args: dict[str, GraphQLArgument]
    description: str

    def to_field(self) -> GraphQLField:
        """The root field the schema assembler installs for this viewer."""
        return GraphQLField(
            self.object_type,
            args=self.args,
            resolve=self.resolve,
            description=self.description,
        )


@dataclass(frozen=True)
class ProtocolResolver:
    """Resolver of a single-protocol viewer.

    `security_key` is the sanitized protocol name, fixed when the viewer is
    built; root and info are ignored.
    """

    security_key: str

    def __call__(self, root: Any, info: Any, **args) -> dict:
        return security_context({self.security_key: args})


def build_viewer(
    name: str,
    protocol_name: str,
    kind: str,
    fields: dict[str, GraphQLField],
    data,
    documents: list[ApiDocument],
) -> Viewer:
    """Build the viewer wrapping `fields` for the protocol `protocol_name`."""
    scheme = data.security[protocol_name]

    # Declared order is kept: basic auth must list username before password
    args = {
        param_name: GraphQLArgument(GraphQLNonNull(GraphQLString), description=param.description or None)
        for param_name, param in scheme.parameters.items()
    }

    if len(documents) == 1:
        type_description = f"A viewer for the security protocol '{scheme.raw_name}'"
        description = f"A viewer that wraps all operations authenticated via {kind}"
    else:
        title = scheme.document.title
        type_description = f"A viewer for the security protocol '{scheme.raw_name}' in {title}"
        description = (
            f"A viewer that wraps all operations authenticated via {kind}\n\n"
            f"For the security scheme: {title} {protocol_name}"
        )

    wrapped = dict(fields)
    return Viewer(
        object_type=GraphQLObjectType(name=name, fields=lambda: wrapped, description=type_description),
        resolve=ProtocolResolver(sanitize_and_store(protocol_name, data.sane_map)),
        args=args,
        description=description,
    )
