"""
Command Line Interface for manifestscan
"""

import argparse
import base64
import binascii
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .analyzer import ManifestAnalyzer
from .classifier import SUPPORTED_NAMES, XCODE_PROJECT_SUFFIX
from .errors import ManifestError
from .models import FormatKind, ManifestInput, NormalizedResult, ParseOutcome
from .parsers import ParserRegistry
from .reporters import get_reporter

logger = logging.getLogger(__name__)


class RequestError(Exception):
    """Request envelope could not be read or decoded."""
    pass


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging"""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='manifestscan',
        description='manifestscan - Normalize CocoaPods, Carthage and Xcode project manifests',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s Podfile.lock Cartfile.resolved          # Console output
  %(prog)s App.xcodeproj/project.pbxproj -f json   # JSON output
  %(prog)s --request request.json -o out.json      # Base64 request envelope
  %(prog)s Podfile.lock README.md --keep-going     # Report failures per file
        """
    )

    parser.add_argument(
        'files',
        nargs='*',
        help='Manifest files to analyze (Podfile.lock, Cartfile.resolved, *.pbxproj)'
    )

    input_group = parser.add_argument_group('Input Options')
    input_group.add_argument(
        '--request',
        help='JSON file of the form {"target_files": {"<name>": "<base64 content>"}}'
    )
    input_group.add_argument(
        '--list-formats',
        action='store_true',
        help='List supported manifest formats and exit'
    )

    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '-o', '--output',
        help='Output file path (default: stdout)'
    )
    output_group.add_argument(
        '-f', '--format',
        choices=['console', 'csv', 'json'],
        default='console',
        help='Output format (default: console)'
    )
    output_group.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    analysis_group = parser.add_argument_group('Analysis Options')
    analysis_group.add_argument(
        '--keep-going',
        action='store_true',
        help='Report a failure for each bad manifest instead of stopping at the first'
    )
    analysis_group.add_argument(
        '-j', '--jobs',
        type=int,
        default=1,
        help='Number of parallel jobs (default: 1)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Debug mode (very verbose)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(args)


def list_formats() -> None:
    """List the manifest formats with a registered parser"""
    formats = ParserRegistry.get_supported_formats()
    parsers = ParserRegistry.stats()
    file_names = {kind: name for name, kind in SUPPORTED_NAMES.items()}
    file_names[FormatKind.XCODE_PROJECT] = f"*{XCODE_PROJECT_SUFFIX}"

    print(f"\nSupported Formats ({len(formats)} total):\n")
    for kind in formats:
        print(f"  {kind.value:<12} {kind.label:<16} {file_names.get(kind, '-'):<20} ({parsers[kind.value]})")


def load_files(paths: List[str]) -> List[ManifestInput]:
    """Read manifest files; the base name is used for classification"""
    inputs = []
    for path_str in paths:
        path = Path(path_str)
        inputs.append(ManifestInput(name=path.name, content=path.read_bytes()))
    return inputs


def load_request(path: str) -> List[ManifestInput]:
    """
    Read a request envelope with base64-encoded manifests.

    Input order follows the order of keys in 'target_files'.
    'access_token', if present, is ignored.

    Raises:
        RequestError: If the envelope is not valid JSON, lacks
            'target_files', or a payload is not valid base64
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            body = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestError(f"Request is not valid JSON: {e}") from e

    target_files = body.get('target_files') if isinstance(body, dict) else None
    if not isinstance(target_files, dict):
        raise RequestError("Request must contain a 'target_files' object")

    inputs = []
    for name, payload in target_files.items():
        if not isinstance(payload, str):
            raise RequestError(f"Content of {name!r} must be a base64 string")
        try:
            content = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise RequestError(f"Content of {name!r} is not valid base64: {e}") from e
        inputs.append(ManifestInput(name=name, content=content))
    return inputs


def run_analysis(args: argparse.Namespace) -> int:
    """Run the analysis and write the report"""
    if args.request:
        inputs = load_request(args.request)
    else:
        inputs = load_files(args.files)

    logger.debug(f"Loaded {len(inputs)} manifests")
    analyzer = ManifestAnalyzer(max_workers=args.jobs)

    outcomes: List[ParseOutcome]
    if args.keep_going:
        outcomes = analyzer.analyze_outcomes(inputs)
    else:
        try:
            outcomes = list(analyzer.analyze(inputs))
        except ManifestError as e:
            outcomes = [e.to_failure()]

    reporter_kwargs = {}
    if args.format == 'console':
        reporter_kwargs['use_colors'] = not args.no_color
        reporter_kwargs['verbose'] = args.verbose

    reporter = get_reporter(args.format, **reporter_kwargs)
    reporter.report(outcomes, args.output)

    if any(not isinstance(o, NormalizedResult) for o in outcomes):
        return 2
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parsed_args = parse_args(args)

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    if parsed_args.list_formats:
        list_formats()
        return 0

    if not parsed_args.files and not parsed_args.request:
        print("Error: No manifest files given. Pass files or --request.", file=sys.stderr)
        return 1

    try:
        return run_analysis(parsed_args)
    except KeyboardInterrupt:
        print("\nAnalysis interrupted by user", file=sys.stderr)
        return 130
    except (OSError, RequestError) as e:
        if parsed_args.debug:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
