"""
CLI argument parsing for the agency tools.
"""
import argparse

from rdn_transit.config import DEFAULT_FILES_PREFIX, DEFAULT_INPUT, DEFAULT_OUTPUT_DIR


def create_agency_tools_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser behind start(args).

    The three positional arguments are the historical argument vector:
    input feed, output directory and output files prefix.
    """
    parser = argparse.ArgumentParser(
        description="Normalize an agency GTFS feed into display-ready routes, trips and stops.")

    parser.add_argument('input', nargs='?', default=DEFAULT_INPUT,
                        help=f"GTFS feed: .zip file, extracted directory or http(s) URL (default: {DEFAULT_INPUT})")
    parser.add_argument('output_dir', nargs='?', default=DEFAULT_OUTPUT_DIR,
                        help=f"Directory to write files to (default: {DEFAULT_OUTPUT_DIR})")
    parser.add_argument('prefix', nargs='?', default=DEFAULT_FILES_PREFIX,
                        help="Prefix added to every output file name (default: none)")

    parser.add_argument('--good-enough', action='store_true',
                        help="Use default colors and merges instead of stopping on unmapped routes")
    parser.add_argument('--force-download', action='store_true',
                        help="Force download even if the feed hasn't been modified")
    parser.add_argument('--pretty', action='store_true',
                        help="Pretty-print JSON output")

    return parser
