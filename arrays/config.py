#!/usr/bin/env python3
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Config:
    """Package configuration"""
    log_level: str = os.getenv("ARRAYS_LOG_LEVEL", "WARNING").upper()
    enable_debug: bool = os.getenv("ARRAYS_DEBUG", "false").lower() in ["true", "1", "yes"]

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.enable_debug else self.log_level


config = Config()


def setup_logging(level: Optional[str] = None):
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level or config.effective_log_level, logging.WARNING),
        format=LOG_FORMAT,
    )
