"""Configuration parser for the benchmark harness."""

from pathlib import Path
from typing import Optional, cast


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings is not provided."""


class ConfigValueError(Exception):
    """Raised when a configuration setting has an unusable value."""


class BenchConfig:
    """A class to save benchmark configuration settings."""

    def __init__(
        self,
        count: int,
        min_length: int,
        max_length: int,
        charset: str,
        seed: Optional[int] = None,
        plot: bool = False,
    ) -> None:
        """Initialize the benchmark configuration.

        Args:
            count (int): The number of random strings to generate.
            min_length (int): The minimum length of a generated string.
            max_length (int): The exclusive upper bound of the length
            of a generated string.
            charset (str): The characters the strings are made of.
            seed (Optional[int]): Seed of the random generator, None
            for a different sample set on every run.
            plot (bool): Whether the timings should be plotted.

        """
        self.count = count
        self.min_length = min_length
        self.max_length = max_length
        self.charset = charset
        self.seed = seed
        self.plot = plot

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Benchmark configuration settings:
                Number of strings: {self.count}
                String length: {self.min_length} to {self.max_length - 1}
                Charset: {self.charset}
                Seed: {"random" if self.seed is None else self.seed}
                Plot results: {"YES" if self.plot else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def validate_config(config: BenchConfig) -> None:
    """Check that the settings describe a usable sample set.

    Args:
        config (BenchConfig): The settings to check.

    Raises:
        ConfigValueError: If a setting is out of its valid range.

    """
    if config.count < 0:
        raise ConfigValueError(
            f"'count' must not be negative, got {config.count}.",
        )
    if config.min_length < 1:
        raise ConfigValueError(
            f"'min_length' must be at least 1, got {config.min_length}.",
        )
    if config.max_length <= config.min_length:
        raise ConfigValueError(
            "'max_length' must be greater than 'min_length', got "
            f"{config.max_length} <= {config.min_length}.",
        )
    if not config.charset:
        raise ConfigValueError("'charset' must not be empty.")


def load_config_file(config_file_path: Path) -> BenchConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigValueError: If a setting is out of its valid range.
        FileNotFoundError: If the config file does not exist.

    Returns:
        BenchConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    # Initialize variables for required config values
    count = min_length = max_length = charset = None
    seed: Optional[int] = None
    plot = False

    # Open and read the configuration file line by line
    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            # Split the line into key and value
            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            # Parse and assign configuration values based on key
            if key == "count":
                count = int(value)
            elif key == "min_length":
                min_length = int(value)
            elif key == "max_length":
                max_length = int(value)
            elif key == "charset":
                charset = value
            elif key == "seed":
                seed = int(value)
            elif key == "plot":
                plot = parse_bool("plot", value)

    # Collect required configuration values for validation
    required = {
        "count": count,
        "min_length": min_length,
        "max_length": max_length,
        "charset": charset,
    }

    # Check for missing required configuration values
    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                f"Please ensure the config file includes a valid line for "
                f"'{key}'.",
            )

    config = BenchConfig(
        cast("int", count),
        cast("int", min_length),
        cast("int", max_length),
        cast("str", charset),
        seed=seed,
        plot=plot,
    )
    validate_config(config)
    return config
