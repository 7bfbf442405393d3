"""Typed view of the ``[selector]`` configuration section."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from pydantic import BaseModel, ConfigDict, ValidationError

from cssel.domain.errors import ConfigurationError

if TYPE_CHECKING:
    from lib_layered_config import Config


class SelectorConfigModel(BaseModel):
    """Pydantic model for the ``[selector]`` section.

    Example:
        >>> SelectorConfigModel().strict_combinators
        False
        >>> SelectorConfigModel.model_validate({"strict_combinators": "true"}).strict_combinators
        True
    """

    strict_combinators: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


def load_selector_settings(config: Config) -> SelectorConfigModel:
    """Validate the ``[selector]`` section of ``config``.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Parsed settings; defaults when the section is absent.

    Raises:
        ConfigurationError: If the section holds values of the wrong type.
    """
    raw: object = config.get("selector", default={})
    try:
        return SelectorConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [selector] configuration: {exc}") from exc


__all__ = [
    "SelectorConfigModel",
    "load_selector_settings",
]
