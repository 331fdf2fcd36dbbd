"""Quarry CLI - Main Entry Point.

The `quarry` command scans a search path for the resources under a
dotted namespace.

Commands:
    scan     - List every resource under a namespace
    roots    - List the roots exposing a namespace
"""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__, __cli_name__
from .utils.colors import dim, error, kv, section, tree_item, _CROSS
from ..config import ConfigError, ConfigLoader, build_provider
from ..resources import (
    ResourceFault,
    ResourceResolver,
    StaticSearchPath,
    class_name_mapper,
    suffix_filter,
)
from ..resources.search_path import SearchPathProvider


@click.group()
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--verbose', '-v', is_flag=True, help='Debug logging')
@click.option('--config', '-c', 'config_paths', multiple=True, help='Config file (YAML or JSON)')
@click.option('--env-file', type=click.Path(dir_okay=False), help='.env file with QUARRY_* keys')
@click.pass_context
def cli(ctx, verbose: bool, config_paths: tuple, env_file: Optional[str]):
    """Classpath-style resource discovery.

    \b
    Quick start:
      quarry scan io.github.mighten.scan -p build/classes
      quarry scan io.github.mighten.scan -p lib/app.jar --classes
      quarry roots io.github.mighten.scan
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['config_paths'] = list(config_paths)
    ctx.obj['env_file'] = env_file


def _resolve_provider(ctx, paths: tuple) -> SearchPathProvider:
    """Explicit --path entries win over configured search path."""
    loader = ConfigLoader.load(
        paths=ctx.obj.get('config_paths') or None,
        env_file=ctx.obj.get('env_file'),
    )
    config = loader.get_scan_config()
    if paths:
        return StaticSearchPath(paths, archive_suffixes=config.archive_suffixes)
    return build_provider(config)


@cli.command('scan')
@click.argument('namespace')
@click.option('--path', '-p', 'paths', multiple=True, help='Search path entry (directory or archive)')
@click.option('--suffix', '-s', 'suffixes', multiple=True, help='Only names ending with this suffix')
@click.option('--classes', is_flag=True, help='Print dotted class names instead of paths')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def scan_cmd(ctx, namespace: str, paths: tuple, suffixes: tuple, classes: bool, as_json: bool):
    """
    List every resource under NAMESPACE.

    Examples:
      quarry scan io.github.mighten.scan -p build/classes
      quarry scan myapp.plugins --classes --suffix .py
      quarry scan io.github.mighten.scan --json
    """
    try:
        resolver = ResourceResolver(namespace, _resolve_provider(ctx, paths))
        if classes:
            mapper = class_name_mapper(*suffixes)
            results = resolver.scan(mapper)
        else:
            records = resolver.scan(suffix_filter(*suffixes))
            results = [r.name for r in records] if not as_json else [
                {"base": r.base, "name": r.name} for r in records
            ]
    except (ResourceFault, ConfigError, ValueError) as e:
        error(f"  {_CROSS} Scan failed: {e}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(results, indent=2))
        return

    for item in results:
        click.echo(item)


@cli.command('roots')
@click.argument('namespace')
@click.option('--path', '-p', 'paths', multiple=True, help='Search path entry (directory or archive)')
@click.pass_context
def roots_cmd(ctx, namespace: str, paths: tuple):
    """
    List the roots exposing NAMESPACE, in search-path order.

    Examples:
      quarry roots io.github.mighten.scan -p build/classes -p lib/app.jar
    """
    try:
        roots = ResourceResolver(namespace, _resolve_provider(ctx, paths)).roots()
    except (ResourceFault, ConfigError, ValueError) as e:
        error(f"  {_CROSS} Lookup failed: {e}")
        sys.exit(1)

    section("Roots")
    kv("Namespace", namespace)
    kv("Roots", str(len(roots)))
    if not roots:
        dim("  (none)")
    for i, root in enumerate(roots):
        kind = "archive" if root.is_archive else "directory"
        tree_item(f"{root.location}  ({kind})", last=i == len(roots) - 1)


def main():
    """Entry point for `quarry` command."""
    cli(obj={})


if __name__ == '__main__':
    main()
