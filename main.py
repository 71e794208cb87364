# main.py

import logging
import sys

from codec_format import parse_encoded, render_decoded, render_encoded
from config import get_config
from data_loader import load_corpus, load_text, read_stream
from knowledge_retriever import FetchError, fetch_text
from tokenizer import RankCodecError, decode_ranks, encode_text
from utils import setup_logging, use_utf8_streams, write_output

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CODEC_ERROR = 1
EXIT_INPUT_ERROR = 2


# ---------------------------------------------------
# 1) Input
# ---------------------------------------------------
def read_input(config, stdin=None) -> str:
    """
    Capture the whole input before any processing starts.
    """
    if config.input:
        logger.info(f"Reading input from {config.input}")
        return load_text(config.input)
    if config.data_dir:
        return load_corpus(config.data_dir)
    if config.url:
        return fetch_text(config.url)
    return read_stream(stdin if stdin is not None else sys.stdin)


# ---------------------------------------------------
# 2) Modes
# ---------------------------------------------------
def log_stats(result, top: int):
    logger.info(
        f"{len(result.tokens)} tokens, {len(result.table)} distinct"
    )
    for rank, token in enumerate(result.table.ranked_tokens[:top], start=1):
        logger.info(f"  #{rank}: {token!r}")


def run_encode(text: str, config) -> str:
    result = encode_text(text)
    if config.stats:
        log_stats(result, config.top)
    return render_encoded(result.table, result.codes)


def run_decode(text: str, config) -> str:
    table, codes = parse_encoded(text)
    logger.debug(f"Decoding {len(codes)} codes against {len(table)} ranks")
    return render_decoded(decode_ranks(codes, table))


def run_roundtrip(text: str, config) -> str:
    result = encode_text(text)
    if config.stats:
        log_stats(result, config.top)
    return render_decoded(decode_ranks(result.codes, result.table))


MODE_HANDLERS = {
    "encode": run_encode,
    "decode": run_decode,
    "roundtrip": run_roundtrip,
}


def run(config, stdin=None) -> str:
    text = read_input(config, stdin=stdin)
    return MODE_HANDLERS[config.mode](text, config)


# ---------------------------------------------------
# 3) Entrypoint
# ---------------------------------------------------
def main(argv=None) -> int:
    config = get_config(argv)

    level = logging.INFO
    if config.verbose:
        level = logging.DEBUG
    elif config.quiet:
        level = logging.WARNING
    setup_logging(config.log_file, level=level)
    use_utf8_streams()

    try:
        output = run(config)
    except RankCodecError as e:
        logger.error(f"{config.mode} failed: {e}")
        return EXIT_CODEC_ERROR
    except (OSError, UnicodeDecodeError, FetchError) as e:
        logger.error(f"Could not read input: {e}")
        return EXIT_INPUT_ERROR

    try:
        write_output(output, config.output)
    except OSError as e:
        logger.error(f"Could not write output: {e}")
        return EXIT_INPUT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
