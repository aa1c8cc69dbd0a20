"""CLI entry point for oas-viewers."""

import logging
from pathlib import Path

import click
from graphql import print_schema

from oas_viewers.auth.builder import create_and_load_viewer
from oas_viewers.config import ViewerOptions
from oas_viewers.errors import ViewerBuildError
from oas_viewers.parser.base import ApiDocument
from oas_viewers.parser.swagger import parse_openapi
from oas_viewers.preprocessing import preprocess
from oas_viewers.schema.assembler import build_schema, group_operations


def _parse_docs(doc_paths: tuple[Path, ...]) -> list[ApiDocument]:
    """Parse every API description given on the command line."""
    try:
        return [parse_openapi(path) for path in doc_paths]
    except ViewerBuildError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log translation details.")
def main(verbose: bool):
    """OAS Viewers: GraphQL viewers for the security schemes of OpenAPI descriptions."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("doc_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the SDL to this file.")
@click.option("--strict", is_flag=True, envvar="OAS_VIEWERS_STRICT", help="Fail on the first warning.")
@click.option("--no-viewer", is_flag=True, envvar="OAS_VIEWERS_NO_VIEWER", help="Put every operation on the root types.")
def schema(doc_paths: tuple[Path, ...], output: Path | None, strict: bool, no_viewer: bool):
    """Print the GraphQL schema (SDL) built from API descriptions."""
    documents = _parse_docs(doc_paths)
    options = ViewerOptions(strict=strict, viewer=not no_viewer)

    try:
        sdl = print_schema(build_schema(documents, options))
    except ViewerBuildError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(sdl)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"Schema saved to {output}")


@main.command()
@click.argument("doc_paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("--mutation", is_flag=True, help="List the mutation viewers instead of the query viewers.")
@click.option("--strict", is_flag=True, envvar="OAS_VIEWERS_STRICT", help="Fail on the first warning.")
def viewers(doc_paths: tuple[Path, ...], mutation: bool, strict: bool):
    """List the viewers built for the security schemes of API descriptions."""
    documents = _parse_docs(doc_paths)

    try:
        data = preprocess(documents, ViewerOptions(strict=strict))
        grouped = group_operations(data)
        fields_by_protocol = grouped.auth_mutation if mutation else grouped.auth_query
        if not fields_by_protocol:
            click.echo("No authenticated operations found.")
            return
        result = create_and_load_viewer(fields_by_protocol, data, is_mutation=mutation)
    except ViewerBuildError as e:
        raise click.ClickException(str(e)) from e

    for name, viewer in result.items():
        args = ", ".join(viewer.args) or "-"
        click.echo(f"{name}({args})")
        click.echo(f"    {viewer.description.splitlines()[0]}")

    for warning in data.diagnostics.warnings:
        click.echo(f"warning: {warning.message}", err=True)
