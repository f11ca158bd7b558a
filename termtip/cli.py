#!/usr/bin/env python3
"""
TermTip CLI Interface
Command-line interface for annotating text with glossary terms
"""

import sys
import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from termtip.core.config import TermTipConfig, default_config
from termtip.core.exceptions import TermTipError
from termtip.core.glossary import Glossary
from termtip.core.matcher import TermSegment

console = Console()
logger = logging.getLogger(__name__)


class TermTipCLI:
    """Command-line interface for TermTip"""

    def __init__(self, glossary: Glossary):
        self.glossary = glossary

    def annotate(self, text: str, as_json: bool = False):
        """Show text with glossary terms highlighted"""
        segments = self.glossary.segment(text)

        if as_json:
            console.out(json.dumps([s.to_dict() for s in segments], indent=2, ensure_ascii=False))
            return segments

        annotated = Text()
        for segment in segments:
            if isinstance(segment, TermSegment):
                annotated.append(segment.text, style="bold cyan underline")
            else:
                annotated.append(segment.text)

        console.print(Panel(annotated, title="📝 Annotated Text", border_style="cyan"))

        # First occurrence of each key, in text order
        found = {}
        for segment in segments:
            if isinstance(segment, TermSegment) and segment.key not in found:
                found[segment.key] = (segment.text, segment.definition)

        if found:
            term_table = Table(title="📖 Glossary Terms")
            term_table.add_column("Term", style="cyan")
            term_table.add_column("Definition", style="green", overflow="fold")

            for term, definition in found.values():
                term_table.add_row(term, definition)

            console.print(term_table)
        else:
            console.print("No glossary terms found.", style="yellow")

        return segments

    def lookup(self, term: str) -> bool:
        """Print the definition of a term"""
        definition = self.glossary.get_definition(term)
        if definition is None:
            console.print(f"❌ Term not found: {term}", style="red", soft_wrap=True)
            return False

        console.print(f"[bold cyan]{escape(term)}[/bold cyan]: {escape(definition)}", soft_wrap=True, highlight=False)
        return True

    def search(self, query: str, limit: int = 10) -> bool:
        """Print terms matching a query"""
        results = self.glossary.search_terms(query)
        if not results:
            console.print(f"No terms match '{query}'", style="yellow", soft_wrap=True)
            return False

        results_table = Table(title=f"🔍 Results for '{query}'")
        results_table.add_column("Term", style="cyan", no_wrap=True)
        results_table.add_column("Definition", style="green", overflow="fold")

        for term, definition in results[:limit]:
            results_table.add_row(term, definition)

        console.print(results_table)
        if len(results) > limit:
            console.print(f"[dim]...and {len(results) - limit} more terms[/dim]")
        return True

    def export(self, format: str, output_path: Optional[str] = None):
        """Export the glossary to stdout or a file"""
        exported = self.glossary.export_glossary(format)

        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(exported)
            console.print(f"✅ Exported {len(self.glossary.dictionary)} terms to {output_path}", style="green")
        else:
            console.out(exported, end="")

    def stats(self):
        """Show glossary statistics"""
        stats_table = Table(title="📊 Glossary Statistics")
        stats_table.add_column("Metric", style="cyan")
        stats_table.add_column("Value", style="green")

        for name, value in self.glossary.get_stats().items():
            stats_table.add_row(name.replace("_", " ").title(), str(value))

        console.print(stats_table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtip",
        description="TermTip - Glossary tooltips for domain vocabulary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Highlight glossary terms
  termtip annotate "A little black dress with a bias cut"

  # Segments as JSON for a renderer
  termtip annotate --json --file description.txt

  # Use an additional glossary
  termtip --glossary brands.yaml lookup uniqlo

  # Export the glossary
  termtip export --format csv --output glossary.csv
        """
    )

    parser.add_argument(
        "--glossary", "-g",
        action="append",
        default=[],
        help="Extra glossary file (.yaml, .yml or .json); may be repeated"
    )

    parser.add_argument(
        "--no-builtin",
        action="store_true",
        help="Do not load the embedded fashion glossary"
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to a YAML configuration file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    annotate_parser = subparsers.add_parser("annotate", help="Highlight glossary terms in text")
    annotate_parser.add_argument("text", nargs="*", help="Text to annotate (stdin if omitted)")
    annotate_parser.add_argument("--file", "-f", help="Read text from a file")
    annotate_parser.add_argument("--json", action="store_true", help="Print segments as JSON")

    lookup_parser = subparsers.add_parser("lookup", help="Show the definition of a term")
    lookup_parser.add_argument("term", nargs="+", help="Term to look up")

    search_parser = subparsers.add_parser("search", help="Search terms and definitions")
    search_parser.add_argument("query", nargs="+", help="Search query")
    search_parser.add_argument("--limit", "-n", type=int, default=10, help="Maximum results (default: 10)")

    export_parser = subparsers.add_parser("export", help="Export the glossary")
    export_parser.add_argument("--format", choices=["json", "yaml", "csv"], default="json")
    export_parser.add_argument("--output", "-o", help="Write to file instead of stdout")

    subparsers.add_parser("stats", help="Show glossary statistics")

    return parser


def _read_text(args) -> str:
    if args.file:
        try:
            return Path(args.file).read_text(encoding='utf-8')
        except OSError as e:
            raise TermTipError(f"Cannot read {args.file}: {e}") from e
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = TermTipConfig.load_from_file(args.config) if args.config else default_config
    except ValueError as e:
        console.print(f"❌ {e}", style="red", soft_wrap=True)
        return 1

    log_level = "DEBUG" if args.verbose else config.log_level
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        glossary = Glossary(
            include_builtin=config.glossary.include_builtin and not args.no_builtin,
            extra_files=list(config.glossary.extra_files) + args.glossary,
        )
        cli = TermTipCLI(glossary)

        if args.command == "annotate":
            cli.annotate(_read_text(args), as_json=args.json)
        elif args.command == "lookup":
            if not cli.lookup(" ".join(args.term)):
                return 1
        elif args.command == "search":
            if not cli.search(" ".join(args.query), limit=args.limit):
                return 1
        elif args.command == "export":
            cli.export(args.format, args.output)
        elif args.command == "stats":
            cli.stats()

    except TermTipError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"❌ Error: {e}", style="red", soft_wrap=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
