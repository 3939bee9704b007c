#!/usr/bin/env python3

import argparse
import io
import logging
import sys
import time

from gaztag import __version__
from gaztag.gaz_dictionary import Gazetteer, NormalizeType
from gaztag.gaz_parser import parse_pos_filter
from gaztag.matcher import InputFormatError, OverlapPolicy, SentenceTagger, TaggerConfig
from gaztag.matcher.core import DEFAULT_MAX_NE_LEN


def show_tagging_statistics(stats, start_time: float, dictionary: Gazetteer):
    """Display tagging statistics."""
    total_time = time.time() - start_time

    sys.stderr.write("=== Tagging Statistics ===\n")
    sys.stderr.write(f"Total processing time: {total_time:.2f} seconds\n")
    sys.stderr.write(
        f"Dictionary: {len(dictionary)} entries, {dictionary.class_count()} classes\n"
    )
    sys.stderr.write(f"Units: {stats.units}\n")
    sys.stderr.write(f"Sentences: {stats.sentences} ({stats.tokens} tokens)\n")
    sys.stderr.write(f"Comment blocks: {stats.comments}\n")
    sys.stderr.write(f"Candidates: {stats.candidates}\n")
    sys.stderr.write(
        f"Selected: {stats.selected} ({(stats.selected / stats.candidates * 100) if stats.candidates else 0:.1f}%)\n"
    )
    sys.stderr.write("==========================\n\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tag tokenized sentences with dictionary classes (BIO scheme)."
    )
    parser.add_argument("dictionary_file", nargs="?", help="Path to dictionary TSV file")
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to tokenized input file. If omitted, input is read from stdin.",
    )
    parser.add_argument(
        "-n",
        "--normalize",
        action="append",
        choices=sorted(NormalizeType.NAMES),
        default=[],
        help="Normalization applied to dictionary keys (repeatable). "
        "'token' switches to single-token matching.",
    )
    parser.add_argument(
        "--max-ne-len",
        type=int,
        default=DEFAULT_MAX_NE_LEN,
        help="Maximum number of tokens in a multi-token match",
    )
    parser.add_argument(
        "--tag-all",
        action="store_true",
        help="Tag every matching span instead of only the longest non-overlapping ones",
    )
    parser.add_argument(
        "--pos-filter",
        default="",
        help="POS filter expression, e.g. '+NN*, +JJ, -VB*' "
        "(+ requires, - disallows, trailing * matches a prefix)",
    )
    parser.add_argument(
        "--multidoc",
        default="",
        metavar="SEPARATOR",
        help="Lines starting with SEPARATOR are passed through as document markers",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all progress updates",
    )
    parser.add_argument(
        "--show-stats",
        action="store_true",
        help="Show tagging statistics",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write output to this file (UTF-8, LF line endings). If omitted, output goes to stdout.",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"dictag: {__version__}")
        return 0

    if not args.dictionary_file:
        parser.error("the following arguments are required: dictionary_file")

    start_time = time.time()

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s"
    )
    logger = logging.getLogger("dictag")

    try:
        config = TaggerConfig(
            normalize_type=NormalizeType.from_names(args.normalize),
            max_ne_len=args.max_ne_len,
            overlap_policy=OverlapPolicy.TAG_ALL
            if args.tag_all
            else OverlapPolicy.TAG_LONGEST,
            pos_filter=parse_pos_filter(args.pos_filter),
        )
    except ValueError as e:
        parser.error(str(e))

    logger.info("Loading dictionary %s", args.dictionary_file)
    try:
        dictionary = Gazetteer.from_file(args.dictionary_file, config.normalize_type)
    except OSError as e:
        logger.error("Cannot read dictionary %s: %s", args.dictionary_file, e)
        return 1

    tagger = SentenceTagger(config)

    def _status_callback(units):
        if units % 1000 == 0:
            sys.stderr.write(f"\rTagging: {units} units")
            sys.stderr.flush()

    input_stream = None
    output_stream = None
    try:
        if args.input_file:
            input_stream = open(args.input_file, "r", encoding="utf-8")
        else:
            input_stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
        if args.output:
            output_stream = open(args.output, "w", encoding="utf-8", newline="\n")
        else:
            # Ensure UTF-8 encoding for stdout
            sys.stdout.flush()
            output_stream = io.TextIOWrapper(
                sys.stdout.buffer, encoding="utf-8", newline="\n"
            )

        stats = tagger.tag_stream(
            input_stream,
            output_stream,
            dictionary,
            multidoc_separator=args.multidoc,
            progress_callback=None if args.quiet else _status_callback,
        )
    except InputFormatError:
        # Already logged by the tagger
        return 1
    except UnicodeDecodeError as e:
        logger.error("Input is not valid UTF-8: %s", e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1
    finally:
        if input_stream is not None:
            if args.input_file:
                input_stream.close()
            else:
                input_stream.detach()
        if output_stream is not None:
            if args.output:
                output_stream.close()
            else:
                output_stream.flush()
                output_stream.detach()

    if not args.quiet and stats.units >= 1000:
        sys.stderr.write("\n")

    if args.show_stats:
        show_tagging_statistics(stats, start_time, dictionary)

    return 0


if __name__ == "__main__":
    sys.exit(main())
