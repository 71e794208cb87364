"""
config.py

Define the run mode, input/output locations and logging settings via argparse.
"""

import argparse


MODES = ("encode", "decode", "roundtrip")


def get_config(argv=None):
    parser = argparse.ArgumentParser(
        prog="rank-codec",
        description="Encode text as frequency ranks of its tokens, or decode it back.",
    )

    parser.add_argument(
        "mode",
        nargs="?",
        choices=MODES,
        default="encode",
        help="'encode' raw text, 'decode' an encoded document, or 'roundtrip' "
        "(encode then decode raw text in one run).",
    )

    # Input & output
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        type=str,
        default=None,
        help="Read input from this file instead of standard input.",
    )
    source.add_argument(
        "--data_dir",
        type=str,
        default=None,
        help="Read and concatenate every .txt file under this folder.",
    )
    source.add_argument(
        "--url",
        type=str,
        default=None,
        help="Fetch a web page and use its visible text as input.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the result to this file instead of standard output.",
    )

    # Logging
    parser.add_argument(
        "--log_file",
        type=str,
        default=None,
        help="Also write log records to this file.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details.",
    )
    verbosity.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Log token counts and the most frequent tokens after encoding.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="How many ranked tokens --stats lists.",
    )

    args = parser.parse_args(argv)

    if args.url and args.mode == "decode":
        parser.error("--url can only supply raw text (encode or roundtrip mode)")
    if args.top < 0:
        parser.error("--top must not be negative")

    return args
