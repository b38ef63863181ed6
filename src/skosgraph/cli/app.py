"""Typer CLI application."""

import json
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from skosgraph.config.logging import setup_logging
from skosgraph.config.settings import get_settings
from skosgraph.i18n import collect_languages
from skosgraph.ir.vocab import VocabConfig
from skosgraph.render.html import render_properties_html
from skosgraph.render.properties import resolve_node
from skosgraph.schema.generator import generate_schema
from skosgraph.utils.config_io import ConfigError, load_config
from skosgraph.utils.node_io import load_nodes

app = typer.Typer(help="skosgraph: schema and custom properties for SKOS vocabularies")


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _load_vocab_config(config_file: Optional[Path]) -> VocabConfig:
    """Load the config given on the command line or in the settings."""
    config_file = config_file or get_settings().config_path
    if config_file is None:
        raise ConfigError("No config file given; pass --config or set SKOSGRAPH_CONFIG_PATH")
    return load_config(config_file)


CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Vocabulary configuration (YAML or JSON)"
)


@app.command()
def schema(
    config_file: Optional[Path] = CONFIG_OPTION,
    language: Optional[List[str]] = typer.Option(
        None, "--language", "-l", help="Language code; repeat for several"
    ),
    nodes: Optional[Path] = typer.Option(
        None, "--nodes", help="Node JSON to collect languages from"
    ),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Schema output file"),
):
    """
    Generate the schema text for the configured vocabulary.

    Languages come from --language, else from the config file, else from
    the language maps in --nodes. With none of these, "en" is used.
    """
    setup_logging()

    try:
        config = _load_vocab_config(config_file)
        languages = list(language or config.languages)
        if not languages and nodes is not None:
            languages = collect_languages(load_nodes(nodes))
    except (FileNotFoundError, ConfigError) as e:
        _fail(e)

    schema_text = generate_schema(languages, config.custom_properties)

    if out is None:
        typer.echo(schema_text, nl=False)
        return

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(schema_text, encoding="utf-8")
    typer.echo(f"✓ Schema written to {out}")


@app.command()
def render(
    node_file: Path,
    config_file: Optional[Path] = CONFIG_OPTION,
    language: Optional[str] = typer.Option(
        None, "--language", "-l", help="Display language (defaults to settings)"
    ),
    output_format: str = typer.Option("html", "--format", "-f", help="html or json"),
):
    """
    Render the custom properties of nodes in one display language.

    Args:
        node_file: JSON file with a node object or a list of nodes
    """
    setup_logging()
    if output_format not in ("html", "json"):
        _fail(ValueError(f"Unknown format '{output_format}', expected html or json"))
    language = language or get_settings().default_language

    try:
        config = _load_vocab_config(config_file)
        node_records = load_nodes(node_file)
    except (FileNotFoundError, ConfigError) as e:
        _fail(e)

    rendered = [
        (node, resolve_node(config.custom_properties, node, language))
        for node in node_records
    ]

    if output_format == "json":
        payload = [
            {
                "id": node.get("id"),
                "type": node.get("type"),
                "properties": [prop.model_dump() for prop in resolved],
            }
            for node, resolved in rendered
        ]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for _, resolved in rendered:
            fragment = render_properties_html(resolved)
            if fragment:
                typer.echo(fragment)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
