#!/usr/bin/env python3

"""
Version Tag Parser Action Entry Point

Functional Core, Imperative Shell: tag lookup and output emission live in
the I/O layer, classification lives in the pure parser modules.
"""

import logging
import os
import sys

from .commit_extraction import extract_commit
from .environment import EnvironmentConfig
from .git_operations import open_repository
from .io_layer import IOLayer
from .output_generation import build_outputs, build_empty_outputs, format_summary
from .parser_registry import ParserRegistry
from .utils import setup_logging

logger = logging.getLogger(__name__)


def resolve_tag(config: EnvironmentConfig, io_layer: IOLayer):
    """Find the tag to parse: the requested one, or the most recent one."""
    if config.tag:
        logger.debug(f"Looking for specified tag: {config.tag}")
        tag = io_layer.find_tag(config.tag)
        if not tag:
            logger.warning(f"Tag '{config.tag}' not found")
            return None
        logger.info(f"Found tag: {tag}")
        return tag

    logger.debug("No tag specified, getting most recent tag")
    tag = io_layer.most_recent_tag()
    if not tag:
        logger.warning("No tags found in repository")
        return None
    logger.info(f"Using most recent tag: {tag}")
    return tag


def main():
    """Main entry point - resolve tag, parse, emit outputs."""
    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)
        setup_logging(config.verbose)

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        logger.debug(f"Input tag: {config.tag or '(empty - will use most recent)'}")
        logger.debug(f"Input versionType: {config.version_type_input}")

        # Step 3: Setup I/O layer
        repo = open_repository(config.repo_path)
        io_layer = IOLayer(repo, config.output_path)

        # Step 4: Resolve the tag
        tag = resolve_tag(config, io_layer)
        if not tag:
            io_layer.write_outputs(build_empty_outputs())
            return

        # Step 5: Parse
        version_type = config.version_type
        logger.debug(f"Parsing tag '{tag}' with versionType '{version_type.value}'")
        result = ParserRegistry().parse(tag, version_type)

        if result.is_valid:
            logger.info(f"Successfully parsed version: {result.version} (format: {result.format_name})")
        else:
            logger.warning(f"Failed to parse tag '{tag}' as valid version")
        logger.debug(
            f"Version components: major={result.info.major}, "
            f"minor={result.info.minor}, patch={result.info.patch}"
        )

        commit = extract_commit(tag)
        if commit:
            logger.debug(f"Extracted commit SHA: {commit}")
        else:
            logger.debug("No commit SHA found in tag")

        # Step 6: Emit outputs
        io_layer.write_outputs(build_outputs(result, commit))

        for line in format_summary(result):
            if result.is_valid:
                logger.info(line)
            else:
                logger.warning(line)
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
