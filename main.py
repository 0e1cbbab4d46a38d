#!/usr/bin/env python3
"""
Flomo Importer - flomo export to Markdown vault

Main entry point. Loads configuration, validates the import options and runs
the import pipeline on one export archive.
"""

import logging
import sys
import argparse

from flomo_importer import __version__
from flomo_importer.config import ConfigManager
from flomo_importer.errors import FlomoImportError
from flomo_importer.pipeline import FlomoImporter
from flomo_importer.vault import Vault


def setup_logging(config: ConfigManager):
    """Configure logging for the application."""
    level = getattr(logging, str(config.get("logging.level", "INFO")).upper(), logging.INFO)
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    log_file = config.log_filename

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=handlers
    )


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Flomo Importer - import a flomo export into a Markdown vault",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py flomo@me-20240331.zip                        # Import into the current directory
  python main.py export.zip --vault ~/Notes                   # Import into a vault
  python main.py export.zip --vault ~/Notes --merge-by-date   # One file per day
  python main.py export.zip --moments skip --canvas skip      # Memo files only
        """
    )

    parser.add_argument(
        "archive",
        help="Path to the flomo export (.zip)"
    )

    parser.add_argument(
        "--vault",
        default=".",
        help="Vault root directory (default: current directory)"
    )

    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--flomo-target",
        help="Base folder inside the vault"
    )

    parser.add_argument(
        "--memo-target",
        help="Memo folder under the base folder"
    )

    parser.add_argument(
        "--merge-by-date",
        action="store_true",
        default=None,
        help="Write one file per date instead of one per memo"
    )

    parser.add_argument(
        "--no-bilink",
        dest="allow_bilink",
        action="store_false",
        default=None,
        help="Keep [[...]] escaped instead of turning it into links"
    )

    parser.add_argument(
        "--moments",
        choices=["copy_with_link", "skip"],
        help="Moments digest mode"
    )

    parser.add_argument(
        "--canvas",
        choices=["copy_with_link", "copy_with_content", "skip"],
        help="Canvas mode"
    )

    parser.add_argument(
        "--canvas-size",
        choices=["S", "M", "L"],
        help="Canvas node size"
    )

    parser.add_argument(
        "--workspace-root",
        help="Directory for temporary extraction workspaces"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Flomo Importer {__version__}"
    )

    return parser.parse_args(argv)


def run_import(args, config: ConfigManager):
    """
    Build the importer from arguments and configuration and run it.

    Returns:
        The finished FlomoCore
    """
    settings = config.import_settings(
        flomo_target=args.flomo_target,
        memo_target=args.memo_target,
        merge_by_date=args.merge_by_date,
        allow_bilink=args.allow_bilink,
        options_moments=args.moments,
        options_canvas=args.canvas,
        canvas_size=args.canvas_size,
    )
    vault = Vault(args.vault, config_dir=config.vault_config_dir)
    workspace_root = args.workspace_root or config.workspace_root

    importer = FlomoImporter(settings, vault, workspace_root=workspace_root, config=config)
    return importer.import_archive(args.archive)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    config = ConfigManager(args.config)
    setup_logging(config)

    logging.info("Flomo Importer - flomo export to Markdown vault")

    try:
        flomo = run_import(args, config)

        print("\n" + "="*60)
        print("🎉 IMPORT COMPLETED")
        print("="*60)
        print(f"\nTotal: {len(flomo.memos)} memos in {len(flomo.files)} files")
        if flomo.tags:
            print(f"Tags: {', '.join(flomo.tags)}")
        if flomo.warnings:
            print("\nWarnings:")
            for warning in flomo.warnings:
                print(f"- {warning}")

    except KeyboardInterrupt:
        logging.info("Import interrupted by user")
        print("\nImport interrupted.")
        sys.exit(130)

    except FlomoImportError as e:
        logging.error(f"Import failed: {e}")
        print(f"\nFlomo Importer Error. Details:\n{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
