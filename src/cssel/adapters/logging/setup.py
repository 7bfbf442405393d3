"""Logging initialisation shared by every entry point.

The console script, ``python -m cssel`` and the test suite all route through
:func:`init_logging`, so the lib_log_rich runtime is configured the same way
regardless of how the package was started.

Contents:
    * :class:`LoggingConfigModel` - validated ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialisation.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from cssel import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` section.

    Unknown keys are kept and handed to ``lib_log_rich.runtime.RuntimeConfig``
    unchanged.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="cssel-ci").service
        'cssel-ci'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the distribution name when unset.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime once per process.

    Enables ``.env`` loading so ``LOG_*`` variables apply, builds the runtime
    from ``config`` and bridges stdlib ``logging`` into it. Later calls
    return immediately.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
