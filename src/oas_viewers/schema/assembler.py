"""Assemble a GraphQL schema whose authenticated operations sit in viewers.

Operations become stub fields (the HTTP call behind them is out of scope);
what this module decides is where each field goes: directly on the query or
mutation root, or inside the viewers of the protocols that authenticate it.
"""

import logging

from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString

from oas_viewers.auth.builder import create_and_load_viewer
from oas_viewers.config import ViewerOptions
from oas_viewers.diagnostics import Diagnostics
from oas_viewers.parser.base import ApiDocument, ApiOperation
from oas_viewers.preprocessing import PreprocessingData, preprocess
from oas_viewers.schema.naming import sanitize

logger = logging.getLogger(__name__)


def build_schema(
    documents: list[ApiDocument],
    options: ViewerOptions | None = None,
    diagnostics: Diagnostics | None = None,
) -> GraphQLSchema:
    """Build the GraphQL schema for one or more API descriptions."""
    data = preprocess(documents, options, diagnostics)
    query_fields, mutation_fields = build_root_fields(data)

    if not query_fields:
        data.diagnostics.warn("NO_QUERY_OPERATIONS", ", ".join(d.title for d in documents))
        query_fields[data.options.placeholder_field] = GraphQLField(
            GraphQLString,
            description="Placeholder field, the API descriptions define no query operation",
            resolve=lambda root, info: None,
        )

    query = GraphQLObjectType(name="Query", fields=query_fields)
    mutation = GraphQLObjectType(name="Mutation", fields=mutation_fields) if mutation_fields else None
    return GraphQLSchema(query=query, mutation=mutation)


class GroupedFields:
    """Operation fields sorted into root fields and per-protocol viewer fields."""

    def __init__(self):
        self.query: dict[str, GraphQLField] = {}
        self.mutation: dict[str, GraphQLField] = {}
        self.auth_query: dict[str, dict[str, GraphQLField]] = {}
        self.auth_mutation: dict[str, dict[str, GraphQLField]] = {}


def group_operations(data: PreprocessingData) -> GroupedFields:
    """Place every operation field on its root or under its protocols."""
    grouped = GroupedFields()

    for document in data.documents:
        for operation in document.operations:
            field_name = sanitize(operation.operation_id)
            field = operation_field(operation)
            protocols = data.protocols_for(document, operation) if data.options.viewer else []

            if not protocols:
                root = grouped.mutation if operation.is_mutation else grouped.query
                root[field_name] = field
                continue

            by_protocol = grouped.auth_mutation if operation.is_mutation else grouped.auth_query
            for protocol in protocols:
                by_protocol.setdefault(protocol, {})[field_name] = field

    return grouped


def build_root_fields(data: PreprocessingData) -> tuple[dict[str, GraphQLField], dict[str, GraphQLField]]:
    """Return the (query, mutation) root fields, viewers included."""
    grouped = group_operations(data)
    query_fields, mutation_fields = grouped.query, grouped.mutation
    auth_query_fields, auth_mutation_fields = grouped.auth_query, grouped.auth_mutation

    if auth_query_fields:
        for name, viewer in create_and_load_viewer(auth_query_fields, data, is_mutation=False).items():
            query_fields[name] = viewer.to_field()
    if auth_mutation_fields:
        for name, viewer in create_and_load_viewer(auth_mutation_fields, data, is_mutation=True).items():
            mutation_fields[name] = viewer.to_field()

    logger.info("Built %d query and %d mutation root fields", len(query_fields), len(mutation_fields))
    return query_fields, mutation_fields


def operation_field(operation: ApiOperation) -> GraphQLField:
    """Stub field standing in for an operation."""
    description = f"Equivalent to {operation.method} {operation.path}"
    if operation.summary:
        description = f"{operation.summary}\n\n{description}"
    return GraphQLField(GraphQLString, description=description)
