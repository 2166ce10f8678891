"""
Command-line interface for the Pinboard to Raindrop.io converter.

This module provides the CLI that fetches all bookmarks from the Pinboard
API and writes them as a Raindrop.io import CSV file.
"""

import argparse
import logging
import sys

from pinboard_to_raindrop import __version__
from pinboard_to_raindrop.config.configuration import Configuration
from pinboard_to_raindrop.core.converter import PinboardToRaindropConverter
from pinboard_to_raindrop.utils.error_handler import (
    AuthenticationError,
    PinboardConverterError,
    ValidationError,
)
from pinboard_to_raindrop.utils.logging_setup import setup_logging
from pinboard_to_raindrop.utils.token_validator import TokenValidator
from pinboard_to_raindrop.utils.validation import (
    validate_config_file,
    validate_folder_name,
    validate_output_file,
)


class CLIInterface:
    """Command line interface for the converter."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="pinboard-to-raindrop",
            description="Convert Pinboard bookmarks into a Raindrop.io import CSV",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  pinboard-to-raindrop -p johndoe:ABC123 -o raindrop.csv
  pinboard-to-raindrop -p johndoe:ABC123 -o raindrop.csv -u @pinboard -c
  pinboard-to-raindrop -p johndoe:ABC123 -o raindrop.csv -r "Old Pinboard"
  PINBOARD_API_TOKEN=johndoe:ABC123 pinboard-to-raindrop -o raindrop.csv

Your API token is listed at https://pinboard.in/settings/password
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )

        parser.add_argument(
            "--pinboard-token",
            "-p",
            help='API token, e.g. "johndoe:xxx..." '
            "(default: PINBOARD_API_TOKEN environment variable)",
        )
        parser.add_argument(
            "--output",
            "-o",
            help="Output file with Raindrop.io formatted bookmarks",
        )
        parser.add_argument(
            "--raindrop-folder",
            "-r",
            default=None,
            help='Target folder in Raindrop.io (default: "Pinboard Imports")',
        )
        parser.add_argument(
            "--user-tags",
            "-u",
            default=None,
            help="Append tags to all bookmarks, useful for tagging imported data",
        )
        parser.add_argument(
            "--clean-description",
            "-c",
            action="store_true",
            help="Clean up descriptions by removing line breaks",
        )
        parser.add_argument(
            "--config",
            help="Configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Show debug logging on stderr",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            ValidationError: If any validation fails
        """
        output_path = validate_output_file(args.output)
        config_path = validate_config_file(args.config)

        if args.raindrop_folder is not None:
            validate_folder_name(args.raindrop_folder)

        return {
            "pinboard_token": args.pinboard_token,
            "output_path": output_path,
            "config_path": config_path,
            "raindrop_folder": args.raindrop_folder,
            "user_tags": args.user_tags,
            "clean_description": args.clean_description,
            "verbose": args.verbose,
        }

    def process_arguments(self, validated_args: dict) -> Configuration:
        """
        Process validated arguments and set up configuration.

        Raises:
            ValidationError: If no API token is available
        """
        config = Configuration(validated_args["config_path"])
        config.update_from_args(validated_args)

        if not config.has_api_token():
            raise ValidationError(
                "Pinboard API token is required "
                "(use --pinboard-token/-p or PINBOARD_API_TOKEN)"
            )

        setup_logging(config, verbose=validated_args["verbose"])
        return config

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        token = None
        try:
            parsed_args = self.parse_args(args)
            validated_args = self.validate_args(parsed_args)
            config = self.process_arguments(validated_args)
            token = config.get_api_token()

            logger = logging.getLogger(__name__)
            options = config.get_transform_options()
            logger.info(f"Output file: {validated_args['output_path']}")
            logger.info(f"Raindrop folder: {options.folder}")
            logger.info(f"Token: {TokenValidator.sanitize_for_logging(token)}")

            converter = PinboardToRaindropConverter(
                token, options, endpoint=config.get_endpoint()
            )
            converter.run(validated_args["output_path"])
            return 0

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except AuthenticationError as e:
            print(f"Error: {e}", file=sys.stderr)
            print(
                "Check your token at https://pinboard.in/settings/password",
                file=sys.stderr,
            )
            return 1
        except PinboardConverterError as e:
            message = TokenValidator.mask_in_error_message(str(e), [token])
            print(f"Error: {message}", file=sys.stderr)
            logging.getLogger(__name__).debug("Conversion failed", exc_info=True)
            return 1
        except KeyboardInterrupt:
            print("Interrupted", file=sys.stderr)
            return 130
        except Exception as e:
            message = TokenValidator.mask_in_error_message(str(e), [token])
            print(f"Error: {message}", file=sys.stderr)
            logging.getLogger(__name__).exception("Unexpected error in CLI")
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
