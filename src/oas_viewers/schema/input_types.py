"""Data definitions and the GraphQL types built from them.

A data definition pairs a JSON schema with a unique GraphQL type name. The
registry hands out one definition per (name, schema) so that building the
same credential shape twice yields the very same GraphQL type object, which
graphql-core requires for types shared between the query and mutation roots.
"""

from dataclasses import dataclass, field

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLString,
)

from oas_viewers.schema.naming import CaseStyle, sanitize

SCALARS = {
    "string": GraphQLString,
    "integer": GraphQLInt,
    "number": GraphQLFloat,
    "boolean": GraphQLBoolean,
}


@dataclass
class DataDefinition:
    preferred_name: str
    type_name: str
    schema: dict
    is_input: bool
    input_type: GraphQLInputObjectType | None = None


@dataclass
class DefinitionRegistry:
    """All data definitions created during one schema build."""

    definitions: list[DataDefinition] = field(default_factory=list)

    def register(self, ref_hint: str, schema: dict, is_input: bool = True) -> DataDefinition:
        """Return the definition for `schema`, creating it on first use."""
        for definition in self.definitions:
            if definition.preferred_name == ref_hint and definition.schema == schema:
                definition.is_input = definition.is_input or is_input
                return definition

        definition = DataDefinition(
            preferred_name=ref_hint,
            type_name=self._unique_type_name(sanitize(ref_hint, CaseStyle.PASCAL)),
            schema=schema,
            is_input=is_input,
        )
        self.definitions.append(definition)
        return definition

    def _unique_type_name(self, name: str) -> str:
        taken = {d.type_name for d in self.definitions}
        candidate, suffix = name, 2
        while candidate in taken:
            candidate = f"{name}{suffix}"
            suffix += 1
        return candidate


def register_data_definition(ref_hint: str, schema: dict, is_input: bool, data) -> DataDefinition:
    """Register a data definition on the preprocessing data's registry."""
    return data.definitions.register(ref_hint, schema, is_input=is_input)


def build_input_type(definition: DataDefinition, registry: DefinitionRegistry) -> GraphQLInputObjectType:
    """Build (or reuse) the input object type `<TypeName>Input` of a data definition.

    Credentials are only ever supplied as arguments, so the input flavour is
    used on the query root as well as on the mutation root.
    """
    if definition.input_type is None:
        definition.input_type = GraphQLInputObjectType(
            name=f"{definition.type_name}Input",
            fields=lambda: _input_fields(definition, registry),
            description=definition.schema.get("description"),
        )
    return definition.input_type


def _input_fields(definition: DataDefinition, registry: DefinitionRegistry) -> dict[str, GraphQLInputField]:
    required = set(definition.schema.get("required", []))
    fields = {}
    for prop_name, prop_schema in definition.schema.get("properties", {}).items():
        type_ = _property_type(prop_schema, f"{definition.preferred_name} {prop_name}", registry)
        if prop_name in required:
            type_ = GraphQLNonNull(type_)
        fields[sanitize(prop_name)] = GraphQLInputField(
            type_,
            description=prop_schema.get("description"),
            out_name=prop_name,
        )
    return fields


def _property_type(prop_schema: dict, ref_hint: str, registry: DefinitionRegistry):
    type_name = prop_schema.get("type", "string")

    if type_name == "object" and prop_schema.get("properties"):
        nested = registry.register(ref_hint, prop_schema, is_input=True)
        return build_input_type(nested, registry)

    if type_name == "array":
        item_type = _property_type(prop_schema.get("items", {}), f"{ref_hint} item", registry)
        return GraphQLList(item_type)

    return SCALARS.get(type_name, GraphQLString)
