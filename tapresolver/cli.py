# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for tapresolver.

Commands:

    validate: Validate the root app config
    setup: Resolve the active tap and write the merged config
    resolve: Resolve a component or asset name to a file path
    assets: Generate the tap's assets index module
    install: Create the tap and temp folders

Example:
    Validate an app:
        ```bash
        $ tapresolver validate ./my-app
        ```

    Set up the "acme" tap:
        ```bash
        $ tapresolver setup ./my-app --tap acme
        ```

    Resolve a component:
        ```bash
        $ tapresolver resolve ./my-app components Button --tap acme
        ```

Exit Codes:

- 0: Success
- 1: Error (invalid app, cleanup failure, unreadable assets folder)

Note:
    Without --tap, the TAP (or legacy CLIENT) environment variable picks
    the tap. Debug mode implies verbose mode and dumps the merged config.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys

from tapresolver.assets import build_assets
from tapresolver.config import load_app_config
from tapresolver.core import setup_tap
from tapresolver.exceptions import TapResolverError
from tapresolver.install import ensure_install_dirs
from tapresolver.logging import get_logger, set_global_logger
from tapresolver.resolver import build_alias_map, make_resolver
from tapresolver.results import TapDescriptor
from tapresolver.validation import validate_app_root


def _configure_logger(args: argparse.Namespace) -> None:
    logger = get_logger(
        verbose=getattr(args, "verbose", False), debug=getattr(args, "debug", False)
    )
    set_global_logger(logger)


def _report_error(err: Exception, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if getattr(args, "verbose", False) or getattr(args, "debug", False):
        import traceback

        traceback.print_exc()
    return 1


def _setup(args: argparse.Namespace) -> TapDescriptor:
    app_root = Path(args.app_root).resolve()
    app_config = load_app_config(app_root)
    return setup_tap(app_root, app_config, args.tap)


def cmd_validate(args: argparse.Namespace) -> int:
    """Handler for 'tapresolver validate' command.

    Args:
        args: Parsed command-line arguments containing the app root.

    Returns:
        Exit code (0 for a valid app, 1 for invalid).

    """
    _configure_logger(args)
    result = validate_app_root(Path(args.app_root).resolve())

    print("=" * 70)
    print("VALIDATION RESULTS")
    print("=" * 70)
    print(f"Config:      {result.config_path}")
    print(f"App Name:    {result.app_name}")
    print(f"Status:      {result.status.upper()}")
    print()

    if result.warnings:
        print(f"Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  [WARNING] {warning}")
        print()

    if result.errors:
        print(f"Errors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  [X] {error}")
        print()

    print("=" * 70)

    if result.status == "valid":
        print()
        print("[SUCCESS] App config is valid!")
        return 0
    print()
    print(f"[FAILED] App config validation failed with {len(result.errors)} error(s).")
    return 1


def cmd_setup(args: argparse.Namespace) -> int:
    """Handler for 'tapresolver setup' command.

    Resolves the active tap, writes the merged config to the temp folder
    and prints the resulting descriptor.

    """
    _configure_logger(args)
    try:
        descriptor = _setup(args)
    except TapResolverError as err:
        return _report_error(err, args)

    print("=" * 70)
    print("TAP SETUP RESULTS")
    print("=" * 70)
    print(f"Active Tap:      {descriptor.active_tap_name}")
    print(f"Has Active Tap:  {descriptor.has_active_tap}")
    print(f"Tap Path:        {descriptor.active_tap_path}")
    print(f"Base Path:       {descriptor.base_path}")
    print(f"Config Path:     {descriptor.effective_config_path}")
    print("=" * 70)
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    """Handler for 'tapresolver resolve' command."""
    _configure_logger(args)
    try:
        descriptor = _setup(args)
        resolver = make_resolver(
            descriptor.effective_config,
            build_alias_map(descriptor),
            {"extensions": args.ext, "basePath": descriptor.base_path}
            if args.ext
            else None,
            args.type,
        )
        print(resolver(args.name))
    except TapResolverError as err:
        return _report_error(err, args)
    return 0


def cmd_assets(args: argparse.Namespace) -> int:
    """Handler for 'tapresolver assets' command."""
    _configure_logger(args)
    try:
        descriptor = _setup(args)
        assets_path = build_assets(
            descriptor.effective_config,
            descriptor.base_path,
            descriptor.active_tap_path,
            args.ext,
        )
    except (TapResolverError, OSError) as err:
        return _report_error(err, args)

    print(f"[SUCCESS] Wrote assets module: {assets_path}")
    return 0


def cmd_install(args: argparse.Namespace) -> int:
    """Handler for 'tapresolver install' command."""
    _configure_logger(args)
    app_root = Path(args.app_root).resolve()
    try:
        created = ensure_install_dirs(app_root, load_app_config(app_root))
    except (TapResolverError, OSError) as err:
        return _report_error(err, args)

    for directory in created:
        print(f"Created: {directory}")
    print(f"[SUCCESS] {len(created)} folder(s) created.")
    return 0


def _add_common_args(parser: argparse.ArgumentParser, tap: bool = True) -> None:
    parser.add_argument(
        "app_root",
        help="Path to the app root (the folder containing app.json)",
    )
    if tap:
        parser.add_argument(
            "--tap",
            default=None,
            help="Tap to activate (default: $TAP, then the app.json name)",
        )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _package_version() -> str:
    try:
        return version("tap-resolver")
    except PackageNotFoundError:
        from tapresolver import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the tapresolver CLI."""
    parser = argparse.ArgumentParser(
        prog="tapresolver",
        description="Resolve and merge per-tap app config and content",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tapresolver {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'validate' command
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate the root app config",
        description="Check app.json for the required tapResolver.paths keys.",
    )
    _add_common_args(parser_validate, tap=False)
    parser_validate.set_defaults(func=cmd_validate)

    # 'setup' command
    parser_setup = subparsers.add_parser(
        "setup",
        help="Resolve the active tap and write the merged config",
        description="Locate the active tap, merge its app.json and write it to the temp folder.",
    )
    _add_common_args(parser_setup)
    parser_setup.set_defaults(func=cmd_setup)

    # 'resolve' command
    parser_resolve = subparsers.add_parser(
        "resolve",
        help="Resolve a file name to a tap or base path",
        description="Print the path a file reference resolves to for the active tap.",
    )
    _add_common_args(parser_resolve)
    parser_resolve.add_argument(
        "type",
        help="Content folder, e.g. components or assets",
    )
    parser_resolve.add_argument(
        "name",
        help="File name, with or without extension",
    )
    parser_resolve.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Extension to try (repeatable; default: tapResolver.extensions.resolve)",
    )
    parser_resolve.set_defaults(func=cmd_resolve)

    # 'assets' command
    parser_assets = subparsers.add_parser(
        "assets",
        help="Generate the tap's assets index module",
        description="Scan the tap's assets folder and write index.js.",
    )
    _add_common_args(parser_assets)
    parser_assets.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Extra allowed asset extension (repeatable)",
    )
    parser_assets.set_defaults(func=cmd_assets)

    # 'install' command
    parser_install = subparsers.add_parser(
        "install",
        help="Create the tap and temp folders",
        description="Create the local taps, external taps and temp folders if missing.",
    )
    _add_common_args(parser_install, tap=False)
    parser_install.set_defaults(func=cmd_install)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the tapresolver CLI.

    This function is registered as the 'tapresolver' console script in
    pyproject.toml.
    """
    args = build_parser().parse_args(argv)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
