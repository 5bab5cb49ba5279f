"""CLI interface for scanning dropping-domain lists."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import DEFAULT_CONFIG_PATH, filters_from_config, lexicon_from_config, load_config, log_level_from_config
from .exceptions import ConfigurationError
from .filtering.state import POLICIES, SORT_DIRS, SORT_KEYS, default_sort_dir
from .loaders import CsvRowSource
from .logging_setup import setup_logging
from .records import RecordBuilder
from .scoring import DomainScorer
from .session import DomainSession, SessionView

console = Console()


def _fmt_metric(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.2f}"


def _prepare(config_path: str) -> Tuple[Dict[str, Any], RecordBuilder]:
    try:
        config = load_config(config_path)
        setup_logging(log_level_from_config(config))
        builder = RecordBuilder(DomainScorer(lexicon=lexicon_from_config(config)))
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    return config, builder


def _load_session(file: str, config_path: str) -> DomainSession:
    config, builder = _prepare(config_path)
    try:
        session = DomainSession(builder=builder, filters=filters_from_config(config))
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    source = CsvRowSource(file)
    with console.status(f"[bold green]Parsing {Path(file).name}..."):
        session.load(source.rows(), source=source)
    return session


def _render_view(view: SessionView):
    top = view.top_pick
    console.print(f"[bold]Total loaded:[/bold] {view.total_loaded:,}")
    console.print(f"[bold]Filtered now:[/bold] {view.total_matched:,}")
    console.print(f"[bold]Top pick:[/bold] {f'{top.domain} ({top.score})' if top else '-'}")

    if view.error:
        console.print(f"[red]Failed to load CSV: {escape(view.error)}[/red]")

    if not view.records:
        console.print("[yellow]No domains match the current filters.[/yellow]")
        return

    table = Table(title="Domains")
    table.add_column("Domain", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Words", justify="right")
    table.add_column("Len", justify="right")
    table.add_column("TLD", style="dim")
    table.add_column("Trend", justify="right")
    table.add_column("Traffic", justify="right")
    table.add_column("Backlinks", justify="right")
    table.add_column("Price", justify="right")

    for record in view.records:
        words = str(record.word_score) if record.has_human_words else "-"
        table.add_row(
            record.domain,
            f"{record.score:.2f}",
            words,
            str(record.length),
            record.tld,
            str(record.trend),
            _fmt_metric(record.metrics.traffic),
            _fmt_metric(record.metrics.backlinks),
            _fmt_metric(record.metrics.price),
        )

    console.print(table)
    console.print(
        f"Showing {len(view.records):,} of {view.total_matched:,} filtered "
        f"(page {view.current_page} / {view.total_pages})"
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """dropscan - Score and filter dropping domain lists."""
    pass


@cli.command()
@click.argument('file', type=click.Path(dir_okay=False))
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_PATH, help='YAML config file')
@click.option('--search', '-s', default=None, help='Substring the domain must contain')
@click.option('--include', default=None, help='Comma-separated terms that must all appear')
@click.option('--exclude', default=None, help='Comma-separated terms that must not appear')
@click.option('--tld', '-t', 'tlds', multiple=True, help='Only these TLDs (repeatable)')
@click.option('--min-length', type=int, default=None, help='Minimum name length')
@click.option('--max-length', type=int, default=None, help='Maximum name length')
@click.option('--hyphens', type=click.Choice(POLICIES), default=None, help='Hyphen policy')
@click.option('--digits', type=click.Choice(POLICIES), default=None, help='Digit policy')
@click.option('--human-words/--any-words', default=None, help='Require human-looking words')
@click.option('--sort', 'sort_by', type=click.Choice(SORT_KEYS), default=None, help='Sort key')
@click.option('--dir', 'sort_dir', type=click.Choice(SORT_DIRS), default=None, help='Sort direction')
@click.option('--max-results', '-n', type=int, default=None, help='Results per page (min 50)')
@click.option('--price-max', type=float, default=None, help='Maximum price')
@click.option('--traffic-min', type=float, default=None, help='Minimum traffic')
@click.option('--backlinks-min', type=float, default=None, help='Minimum backlinks')
@click.option('--trend-min', type=int, default=None, help='Require a trend score of at least this')
@click.option('--page', '-p', type=int, default=1, help='Page number')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
def scan(file, config_path, search, include, exclude, tlds, min_length, max_length, hyphens,
         digits, human_words, sort_by, sort_dir, max_results, price_max, traffic_min,
         backlinks_min, trend_min, page, output):
    """Load a CSV drop list and show the filtered, ranked domains."""
    session = _load_session(file, config_path)

    patch: Dict[str, Any] = {
        'search': search,
        'include': include,
        'exclude': exclude,
        'length_min': min_length,
        'length_max': max_length,
        'hyphens': hyphens,
        'digits': digits,
        'max_results': max_results,
        'price_max': price_max,
        'traffic_min': traffic_min,
        'backlinks_min': backlinks_min,
    }
    patch = {key: value for key, value in patch.items() if value is not None}
    if tlds:
        patch['selected_tlds'] = tuple(tlds)
    if human_words is not None:
        patch['human_words'] = 'require' if human_words else 'any'
    if trend_min is not None:
        patch.update(trend_mode='require', trend_min=trend_min)

    try:
        session.update_filters(patch)
        if sort_by is not None:
            session.update_filters(sort_by=sort_by, sort_dir=default_sort_dir(sort_by))
        if sort_dir is not None:
            session.update_filters(sort_dir=sort_dir)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    session.set_page(page)
    view = session.view()
    _render_view(view)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(view.to_dict(), f, indent=2)
        console.print(f"[green]Saved to {output}[/green]")

    if view.error:
        raise SystemExit(1)


@cli.command()
@click.argument('file', type=click.Path(dir_okay=False))
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_PATH, help='YAML config file')
@click.option('--limit', '-n', default=50, help='Number of TLDs to show')
def tlds(file, config_path, limit):
    """Show the TLDs present in a drop list with their counts."""
    session = _load_session(file, config_path)
    view = session.view()

    if view.error:
        console.print(f"[red]Failed to load CSV: {escape(view.error)}[/red]")

    table = Table(title=f"TLDs ({len(view.tld_facets)})")
    table.add_column("TLD", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for facet in view.tld_facets[:limit]:
        table.add_row(f".{facet.tld}", f"{facet.count:,}")
    console.print(table)

    if view.error:
        raise SystemExit(1)


@cli.command()
@click.argument('domain')
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_PATH, help='YAML config file')
def score(domain, config_path):
    """Score a single domain."""
    _, builder = _prepare(config_path)
    record = builder.build({'domain': domain})
    if record is None:
        raise click.ClickException(f"{domain!r} is not a domain name with a TLD")

    console.print(f"\n[bold]Domain:[/bold] {record.domain}")
    console.print(f"[bold green]Score:[/bold green] {record.score:.2f}")
    console.print(f"\n[bold]Breakdown:[/bold]")
    console.print(f"  Name:        {record.sld} ({record.length} chars)")
    console.print(f"  TLD:         .{record.tld}")
    console.print(f"  Hyphen:      {'yes' if record.has_hyphen else 'no'}")
    console.print(f"  Digits:      {'yes' if record.has_number else 'no'}")
    console.print(f"  Keywords:    {', '.join(record.keywords) or '-'}")
    console.print(f"  Human words: {'yes' if record.has_human_words else 'no'}")
    console.print(f"  Word score:  {record.word_score}")
    console.print(f"  Trend:       {record.trend}")


def main():
    cli()


if __name__ == '__main__':
    main()
