from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from dealdesk.runtime.config.config_data import ConfigData
from dealdesk.runtime.config.config_template import load_templated_config

DEFAULT_CONFIG_PATH = Path("config.json")


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData
    config_path: Path | None = None


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=ConfigData())
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ConfigData:
    """Load the configuration file at ``path`` and make it current.

    Relative paths are resolved against the working directory.
    """
    config = load_templated_config(path)
    set_context(AppContext(config=config, config_path=path))
    return config


@contextmanager
def with_context(config: ConfigData) -> Iterator[ConfigData]:
    """Temporarily replace the current configuration.

    Example:
        with with_context(ConfigData(ConnectionStrings={"DefaultConnection": "sqlite://"})):
            assert get_config().connection_string == "sqlite://"
    """
    token = set_context(replace(get_context(), config=config))
    try:
        yield config
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
