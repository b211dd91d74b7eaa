"""
CLI workflow orchestration for Image Similarity.

Provides the CLIOrchestrator class that coordinates a CLI invocation from
argument parsing through printing the results of one subcommand.
"""

from __future__ import annotations

import logging

from ..comparison import compare_images, compare_directory, match_directory
from ..exceptions import ImageSimilarityError
from ..fingerprint import fingerprint_to_hex, has_heif_support
from ..fingerprint.dependencies import Image
from ..models import SimilarityConfig
from ..scanner import fingerprint_file
from ..user_config import get_user_config
from ..utils.validators import parse_extensions, validate_directory, validate_workers
from .arg_parser import parse_arguments
from .reporting import (
    print_score,
    print_error,
    print_ranked_pairs,
    print_ranked_matches,
    print_fingerprint,
)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates one CLI invocation.

    Parses arguments, applies the user configuration, and dispatches to the
    handler of the selected subcommand. Results go to stdout, logs to stderr.
    """

    def __init__(self, argv=None):
        """Initialize the orchestrator."""
        self.argv = argv
        self.logger = None
        self.args = None
        self.user_config = get_user_config()
        self.config = SimilarityConfig()
        self.workers = self.user_config.default_workers
        self.show_progress = True

    def run(self) -> int:
        """
        Execute the CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)
        """
        exit_code = self._setup_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._configure_phase()
        if exit_code != 0:
            return exit_code

        handlers = {
            'pair': self._run_pair,
            'directory': self._run_directory,
            'match': self._run_match,
            'hash': self._run_hash,
            'config': self._run_config,
        }
        return handlers[self.args.command]()

    def _setup_phase(self) -> int:
        """Parse arguments and setup logging."""
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)
        return 0

    def _configure_phase(self) -> int:
        """Resolve workers, extensions and decoder limits."""
        if self.args.workers is not None:
            self.workers = self.args.workers

        # Covers -w as well as IMGSIM_WORKERS and config.json
        is_valid, error = validate_workers(self.workers)
        if not is_valid:
            self.logger.error(error)
            return 1
        self.workers = int(self.workers)

        extension = getattr(self.args, 'extension', None)
        if extension is not None:
            extensions = parse_extensions(extension)
        else:
            extensions = self.user_config.default_extensions
        self.config = self.config.with_extensions(extensions)

        Image.MAX_IMAGE_PIXELS = self.user_config.max_image_pixels
        self.show_progress = not self.args.no_progress

        self.logger.debug(
            f"Fingerprint parameters: resize_length={self.config.resize_length}, "
            f"dct_block={self.config.dct_block}, workers={self.workers}"
        )
        return 0

    def _run_pair(self) -> int:
        """
        Print the similarity of two images.

        Failures are printed as '[ERROR] <reason>'; the exit code is always 0.
        """
        try:
            score = compare_images(self.args.imagea, self.args.imageb, self.config)
        except ImageSimilarityError as e:
            print_error(e)
            return 0

        print_score(score)
        return 0

    def _run_directory(self) -> int:
        """Print every image pair under the directory, most similar first."""
        self._warn_if_not_directory()

        self.logger.info(f"Scanning {self.args.directory} for images...")
        pairs = compare_directory(
            self.args.directory,
            config=self.config,
            max_workers=self.workers,
            show_progress=self.show_progress,
            logger=self.logger,
        )

        if pairs is None:
            self.logger.info("No available images with given extensions in the given directory")
            return 0

        print_ranked_pairs(pairs)
        return 0

    def _run_match(self) -> int:
        """Print every image under the directory by similarity to the query image."""
        self._warn_if_not_directory()

        try:
            matches = match_directory(
                self.args.image,
                self.args.directory,
                config=self.config,
                max_workers=self.workers,
                show_progress=self.show_progress,
                logger=self.logger,
            )
        except ImageSimilarityError as e:
            print_error(e)
            return 1

        if matches is None:
            self.logger.info("No available images with given extensions in the given directory")
            return 0

        print_ranked_matches(matches)
        return 0

    def _run_hash(self) -> int:
        """Print the hexadecimal fingerprint of each image."""
        exit_code = 0
        for path in self.args.image:
            try:
                fingerprint = fingerprint_file(path, self.config)
            except ImageSimilarityError as e:
                print_error(e)
                exit_code = 1
                continue

            self.logger.debug(f"{path}: {fingerprint}")
            print_fingerprint(fingerprint_to_hex(fingerprint), str(path))

        return exit_code

    def _run_config(self) -> int:
        """Show the effective user configuration or create an example file."""
        if self.args.init:
            if self.user_config.create_example_config():
                print("Created example configuration file at:")
                print(f"  {self.user_config.config_file_path}")
                return 0
            print("Failed to create configuration file.")
            return 1

        print(f"Configuration file: {self.user_config.config_file_path}")
        if self.user_config.config_file_path.exists():
            print("Status: Found")
        else:
            print("Status: Not found (using defaults)")
            print("\nRun 'imgsim config --init' to create one.")

        print("\nCurrent settings:")
        print(f"  default_workers: {self.user_config.default_workers}")
        print(f"  default_extensions: {','.join(sorted(self.user_config.default_extensions))}")
        print(f"  max_image_pixels: {self.user_config.max_image_pixels:,}")
        print(f"  heif_support: {has_heif_support()}")
        return 0

    def _warn_if_not_directory(self) -> None:
        is_valid, error = validate_directory(str(self.args.directory))
        if not is_valid:
            self.logger.warning(error)


__all__ = ['CLIOrchestrator', 'setup_logging']
