# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for SimpleArgParse."""
import logging

logger: logging.Logger = logging.getLogger("simpleargparse")
