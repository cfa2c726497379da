#!/usr/bin/env python3
"""
iching-daily — One I Ching hexagram per day, revealed a little at a time.

Run as a prompt hook: the trigger payload arrives on stdin and is ignored.
The first invocation of a day casts a hexagram from true entropy (three-coin
method) and prints its Great Image. Later invocations print, by chance,
another commentary or a derived hexagram (nuclear, shadow, mirror, becoming),
or nothing at all.

Usage:
    echo '{}' | iching-daily          # hook mode
    iching-daily --show               # today's full cast
    iching-daily --history 7          # last seven archived casts
    iching-daily --verify             # check the King Wen table
"""

from __future__ import annotations
import argparse
import datetime as dt
import json
import logging
import sys
from typing import Callable, List, Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .codec import verify_table
from .derivation import Cast
from .hexagrams import get_hexagram
from .readings import DERIVED_LABELS, DerivedType, format_lines, hexagram_heading
from .reveal import RevealScheduler
from .store import DailyCastStore, DailyRecord

# Configure logging
logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

console = Console()


def read_payload(stream: Optional[TextIO]) -> None:
    """Consume the hook payload as raw bytes. Its contents are never used."""
    if stream is None or stream.isatty():
        return
    buffer = getattr(stream, "buffer", None)
    try:
        raw = buffer.read() if buffer is not None else stream.read()
        if raw.strip():
            json.loads(raw)
    except ValueError:
        logger.debug("Hook payload is not JSON; ignoring it")


def write_line(text: str, stream: Optional[TextIO] = None) -> None:
    """Write one line as UTF-8, whatever encoding the stream was opened with."""
    stream = stream or sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text + "\n")
        stream.flush()
        return
    stream.flush()
    buffer.write((text + "\n").encode("utf-8"))
    buffer.flush()


def run_hook(store: DailyCastStore, scheduler: RevealScheduler,
             today: Optional[dt.date] = None, stdin: Optional[TextIO] = None,
             emit: Optional[Callable[[str], None]] = None) -> Optional[str]:
    """
    One hook invocation: load, advance, emit, persist.

    The record is saved only after the line has been written, and history
    only after the record is saved, so a failed write shows the primary
    again next time and a failed save never archives twice.
    """
    read_payload(stdin)
    result = scheduler.advance(store.load(), today or dt.date.today())
    if result.output and emit is not None:
        emit(result.output)
    store.save(result.record)
    if result.archived is not None:
        store.append_history(result.archived)
    return result.output


# === Display Functions ===
def _bits(cast: Cast) -> List[int]:
    return [1 if line.is_yang else 0 for line in cast.lines]


def _summary(number: int) -> str:
    return f"#{number} {hexagram_heading(number)}"


def display_cast(record: DailyRecord):
    """Display the full cast for a record."""
    cast = record.cast
    g = get_hexagram(cast.primary)

    primary_content = "\n".join([
        f"[bold]Hexagram #{cast.primary}:[/bold] {hexagram_heading(cast.primary)}",
        "",
        "[bold]Lines:[/bold]",
        *format_lines(_bits(cast), cast.changing_positions),
        "",
        f"[bold]大象:[/bold] {g['image_zh']}",
        f"[bold]Image:[/bold] {g['image']}",
        "",
        f"[bold]彖:[/bold] {g['judgement_zh']}",
        f"[bold]Judgement:[/bold] {g['judgement']}",
    ])
    console.rule(f"[bold cyan]☯ I CHING • {record.date} ☯[/bold cyan]")
    console.print(Panel(primary_content, title="[bold]Primary Hexagram[/bold]", border_style="cyan"))

    if cast.becoming is not None:
        t = get_hexagram(cast.becoming)
        becoming_content = "\n".join([
            f"[yellow]Changing positions: {', '.join(str(p) for p in cast.changing_positions)}[/yellow]",
            "",
            f"[bold]Hexagram #{cast.becoming}:[/bold] {hexagram_heading(cast.becoming)}",
            "",
            f"[bold]Image:[/bold] {t['image']}",
        ])
        console.print(Panel(becoming_content, title=f"[bold]{DERIVED_LABELS[DerivedType.BECOMING]}[/bold]",
                            border_style="magenta"))
    else:
        console.print("[dim]No changing lines.[/dim]")

    table = Table(title="Derived Hexagrams", show_header=True, header_style="bold cyan")
    table.add_column("Relation", style="cyan", no_wrap=True)
    table.add_column("Hexagram", style="bold white")
    table.add_row(DERIVED_LABELS[DerivedType.NUCLEAR], _summary(cast.nuclear))
    table.add_row(DERIVED_LABELS[DerivedType.SHADOW], _summary(cast.shadow))
    table.add_row(DERIVED_LABELS[DerivedType.MIRROR], _summary(cast.mirror))
    table.add_row("Diagonal (shadow + mirror)", _summary(cast.diagonal))
    console.print(table)

    if cast.is_self_mirroring:
        console.print("[dim]自綜: this hexagram is its own mirror.[/dim]")
    if cast.is_locked_pair:
        console.print("[dim]錯綜: shadow and mirror are the same hexagram.[/dim]")


def display_history(store: DailyCastStore, limit: Optional[int]):
    entries = store.read_history(limit)
    if not entries:
        console.print("[dim]No archived casts yet.[/dim]")
        return
    table = Table(title="I Ching History", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Primary", style="bold white")
    table.add_column("Changing", style="yellow")
    table.add_column("Becoming", style="magenta")
    for entry in entries:
        cast = entry.cast
        table.add_row(
            entry.date,
            _summary(cast.primary),
            ",".join(str(p) for p in cast.changing_positions) or "—",
            _summary(cast.becoming) if cast.becoming is not None else "—",
        )
    console.print(table)


def run_verify() -> int:
    errors = verify_table()
    if not errors:
        console.print("[green]✓ All 64 King Wen mappings verified against the line patterns[/green]")
        return 0
    console.print("[red]✗ Errors found:[/red]")
    for error in errors:
        console.print(f"  {error}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iching-daily",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--show',
        action='store_true',
        help="Show today's full cast without changing what has been revealed"
    )
    mode.add_argument(
        '--history',
        nargs='?',
        type=int,
        const=10,
        metavar='N',
        help='Show the last N archived casts (default 10)'
    )
    mode.add_argument(
        '--verify',
        action='store_true',
        help='Check the King Wen lookup table and exit'
    )
    parser.add_argument(
        '--cache',
        help="Path of the day's record (default ~/.claude/iching.json)"
    )
    parser.add_argument(
        '--history-file',
        help='Path of the history log (default ~/.claude/iching.jsonl)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug details to stderr'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.verify:
        return run_verify()

    if args.show:
        record = DailyCastStore(args.cache, args.history_file).load()
        if record is None or record.date != dt.date.today().isoformat():
            console.print("[dim]No hexagram cast yet today.[/dim]")
            return 0
        display_cast(record)
        return 0

    if args.history is not None:
        display_history(DailyCastStore(args.cache, args.history_file), args.history)
        return 0

    # Hook mode: never disturb the host, whatever goes wrong
    try:
        store = DailyCastStore(args.cache, args.history_file)
        run_hook(store, RevealScheduler(), stdin=sys.stdin, emit=write_line)
    except Exception:
        logger.debug("Casting failed; printing nothing", exc_info=True)
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
