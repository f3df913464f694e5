"""Command-line interface for Map Labeler.

Quick checks of renderings text without starting the labeling UI: show the
map form, the compiled patterns, the status of a label, or a verse tally.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from maplabeler.config import Config, get_config
from maplabeler.models.renderings import TermRenderingEntry
from maplabeler.services.map_form import MapFormResolver
from maplabeler.services.pattern_compiler import RenderingPatternCompiler
from maplabeler.services.reference_formatter import VernacularReferenceFormatter
from maplabeler.services.status_classifier import LabelStatusClassifier
from maplabeler.services.verse_tally import VerseMatchTally
from maplabeler.version import format_version_string

__all__ = ["cli_main", "configure_logging"]

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(config: Config) -> None:
    """Install log sinks: stderr, plus a rotating file when configured."""
    logger.remove()
    logger.add(sys.stderr, level=config.log_level, format=LOG_FORMAT)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Rotation at 10 MB, keep 5 old files
        logger.add(
            log_path,
            rotation="10 MB",
            retention=5,
            level=config.log_level,
            format=LOG_FORMAT,
            backtrace=True,
            diagnose=True,
        )
        logger.debug(f"Logging to file: {log_path}")


def _split_flags(args: list[str]) -> tuple[list[str], list[str], set[str]]:
    """Separate positional arguments, ``--deny REF`` values and boolean flags."""
    positional: list[str] = []
    denials: list[str] = []
    flags: set[str] = set()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--guessed", "--short"):
            flags.add(arg[2:])
        elif arg == "--deny":
            if i + 1 >= len(args):
                raise ValueError("--deny requires a verse reference")
            denials.append(args[i + 1])
            i += 1
        else:
            positional.append(arg)
        i += 1
    return positional, denials, flags


def cmd_map_form(renderings: str) -> int:
    """Print the map form of a renderings string."""
    map_form = MapFormResolver().resolve(TermRenderingEntry(renderings=renderings))
    if not map_form:
        print("✗ No map form (no renderings)")
        return 1
    print(map_form)
    return 0


def cmd_patterns(renderings: str) -> int:
    """Print each compiled pattern."""
    patterns = RenderingPatternCompiler(cache_size=0).compile(renderings)
    if not patterns:
        print("✗ No usable renderings")
        return 1
    for pattern in patterns:
        print(f"{pattern.index}. {pattern.source}")
        print(f"   search: {pattern.bounded.pattern}")
        print(f"   whole:  {pattern.anchored.pattern}")
    return 0


def cmd_classify(renderings: str, label: str, guessed: bool) -> int:
    """Print the status of a label."""
    entry = TermRenderingEntry(renderings=renderings, is_guessed=guessed)
    status = LabelStatusClassifier().classify(entry, label)
    print(f"Map form: {MapFormResolver().resolve(entry)}")
    print(f"Status:   {status.name} ({status.label})")
    return 0


def cmd_tally(renderings: str, verse_args: list[str], denials: list[str]) -> int:
    """Print the verse tally for ``REF=TEXT`` arguments."""
    verses: dict[str, str] = {}
    for arg in verse_args:
        if "=" not in arg:
            print(f"✗ Expected REF=TEXT, got: {arg}")
            return 1
        ref, text = arg.split("=", 1)
        verses[ref] = text

    entry = TermRenderingEntry(renderings=renderings, denials=set(denials))
    tallier = VerseMatchTally()
    tally = tallier.tally(entry, list(verses), verses)

    for ref, text in verses.items():
        span = tallier.highlight(entry, text)
        if span:
            mark = f"✓ {text[:span.start]}[{span.text}]{text[span.end:]}"
        elif not text:
            mark = "  (no text)"
        elif ref in entry.denials:
            mark = f"~ {text} (denied)"
        else:
            mark = f"✗ {text}"
        print(f"{ref}: {mark}")

    print()
    suffix = " (with denials)" if tally.any_denials else ""
    print(f"Found: {tally.fraction()}{suffix}")
    return 0


def cmd_ref(config: Config, reference: str, use_short: bool) -> int:
    """Print a reference with the configured punctuation and digits.

    Book names are not configured, so book codes are printed as is.
    """
    print(VernacularReferenceFormatter.from_config(config).format(reference, use_short))
    return 0


def print_help() -> None:
    """Print CLI help message."""
    print(format_version_string())
    print()
    print("Usage: maplabeler [COMMAND] [ARGS]")
    print()
    print("Commands:")
    print("  map-form RENDERINGS               Show the map form of renderings")
    print("  patterns RENDERINGS               Show the compiled match patterns")
    print("  classify RENDERINGS LABEL         Show the status of a label")
    print("           [--guessed]              Treat the renderings as guessed")
    print("  tally RENDERINGS REF=TEXT...      Count verses containing a rendering")
    print("        [--deny REF]                Accept a verse as lacking a rendering")
    print("  ref REFERENCE [--short]           Format a reference in project style")
    print("  version                           Show version information")
    print("  help                              Show this help message")
    print()
    print("Renderings items are separated by '||'.")
    print()
    print("Examples:")
    print('  maplabeler map-form "Yerusalem*||Salem (short)"')
    print('  maplabeler classify "(@Yelusalema)||Yerusalem*" Yelusalema')
    print('  maplabeler tally Yerusalem "GEN001001=In Yerusalem" --deny GEN001002')
    print('  maplabeler ref "1SA 2.3-5;2SA 1"')
    print()


def cli_main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args is None:
        args = sys.argv[1:]

    # No command or help
    if not args or args[0] in ("help", "-h", "--help"):
        print_help()
        return 0

    command = args[0].lower()

    try:
        config = get_config()
        configure_logging(config)
        positional, denials, flags = _split_flags(args[1:])

        if command == "version":
            print(format_version_string())
            return 0
        elif command == "map-form" and len(positional) == 1:
            return cmd_map_form(positional[0])
        elif command == "patterns" and len(positional) == 1:
            return cmd_patterns(positional[0])
        elif command == "classify" and len(positional) == 2:
            return cmd_classify(positional[0], positional[1], "guessed" in flags)
        elif command == "tally" and len(positional) >= 1:
            return cmd_tally(positional[0], positional[1:], denials)
        elif command == "ref" and len(positional) == 1:
            return cmd_ref(config, positional[0], "short" in flags)
        elif command in ("map-form", "patterns", "classify", "tally", "ref"):
            print(f"✗ Wrong arguments for {command}")
            print()
            print_help()
            return 1
        else:
            print(f"✗ Unknown command: {command}")
            print()
            print_help()
            return 1
    except Exception as e:
        logger.exception("Command failed")
        print(f"✗ Error: {e}")
        return 1
