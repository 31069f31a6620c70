"""configgen — analysis configuration generator.

Combines a project's ``.deepsource.toml`` preferences with the files found
in its source tree and produces the ``analysis_config.json`` consumed by
downstream analyzers.
"""

__version__ = "0.1.0"

DEFAULT_MOUNT_PREFIX = "/code"
CONFIG_FILENAME = ".deepsource.toml"
OUTPUT_FILENAME = "analysis_config.json"
