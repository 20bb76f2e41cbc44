"""
Version Checker - Main Entry Point

This is the main entry point for the version-checker command.
Parses command-line arguments and dispatches to the CLI operations.

Author: Version Checker Project
"""

import sys
import argparse
from pathlib import Path

from .version import VERSION


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='version-checker',
        description='Version Checker - check whether a newer app version is available'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', help='Also write the log to this file')

    subparsers = parser.add_subparsers(dest='operation', required=True)

    check = subparsers.add_parser('check', help='Check for an update')
    check.add_argument('--current-version', required=True, help='Installed app version')
    check.add_argument('--platform', required=True, choices=['ios', 'android'],
                       help='App platform')
    check.add_argument('--build-number', help='Installed build number')
    check.add_argument('--locale', help='Preferred locale for the response')
    check.add_argument('--api-url', help='Version check endpoint (overrides config)')
    check.add_argument('--timeout', type=int, help='Request timeout in seconds (overrides config)')
    check.add_argument('--config', help='Path of JSON config file')
    check.add_argument('--manifest', help='Answer from a local manifest instead of the endpoint')
    check.add_argument('--cache-file', help='Cache file path')
    check.add_argument('--no-cache', action='store_true', help='Disable result caching')
    check.add_argument('--json', action='store_true', help='Print the result as JSON')

    compare = subparsers.add_parser('compare', help='Compare two versions')
    compare.add_argument('version1')
    compare.add_argument('version2')

    clear = subparsers.add_parser('clear-cache', help='Remove cached results')
    clear.add_argument('--cache-file', help='Cache file path')
    clear.add_argument('--config', help='Path of JSON config file')

    return parser


def main(argv=None):
    """
    Main entry point for the version-checker command.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    from .cli import setup_cli_logging, run_check, run_compare, run_clear_cache
    setup_cli_logging(args.log_level, Path(args.log_file) if args.log_file else None)

    if args.operation == 'check':
        return run_check(
            current_version=args.current_version,
            platform=args.platform,
            build_number=args.build_number,
            locale=args.locale,
            api_url=args.api_url,
            config_file=args.config,
            manifest_file=args.manifest,
            cache_file=args.cache_file,
            no_cache=args.no_cache,
            timeout=args.timeout,
            as_json=args.json
        )
    elif args.operation == 'compare':
        return run_compare(args.version1, args.version2)
    else:
        return run_clear_cache(args.cache_file, args.config)


if __name__ == '__main__':
    sys.exit(main())
