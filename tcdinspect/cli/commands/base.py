#!/usr/bin/env python3
"""
tcdinspect CLI Commands - Base Abstractions

Command Pattern implementation for tcdinspect CLI commands.

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...core.decoder_runner import DecoderRunner
from ...core.pipeline import DecodePipeline
from ...utils.logger import setup_logger


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger("tcdinspect")
    logger.setLevel(level)
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for status output (stderr)
        logger: Logger instance for command execution logging
        config: Application configuration object
        verbose: Flag for verbose output mode
        quiet: Flag for suppressing non-critical output
    """

    console: Console
    logger: Any
    config: Config | None = None
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "CommandContext":
        """
        Factory method to create a CommandContext with proper initialization.

        Args:
            config: Optional configuration object
            verbose: Enable verbose output
            quiet: Suppress non-critical output

        Returns:
            Configured CommandContext instance
        """
        console = Console(stderr=True)
        logger = setup_logger()

        configure_logging_levels(verbose, quiet)

        return cls(
            console=console,
            logger=logger,
            config=config,
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command encapsulates one CLI operation (decode, batch, check,
    version) and returns a process exit code.
    """

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        pass

    @property
    def context(self) -> CommandContext:
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _get_config(self, config_path: str | None = None) -> Config:
        """
        Load configuration from path or use context config.

        Args:
            config_path: Optional path to custom config file

        Returns:
            Config object instance
        """
        if config_path:
            return Config(config_path)
        if self.context.config is None:
            self.context.config = Config()
        return self.context.config

    def _build_pipeline(
        self,
        config: Config,
        decoder: str | None = None,
        timeout: float | None = None,
    ) -> DecodePipeline:
        """
        Create a decode pipeline, letting CLI options win over configuration.

        Args:
            config: Loaded configuration
            decoder: --decoder value
            timeout: --timeout value

        Returns:
            DecodePipeline ready for use
        """
        runner = DecoderRunner(
            executable=decoder or config.get_decoder_executable(),
            timeout=timeout if timeout is not None else config.get_decoder_timeout(),
        )
        self.context.logger.debug(f"Using decoder {runner.executable}")
        return DecodePipeline.from_config(config, runner=runner)
