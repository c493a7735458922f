"""
Session configuration: base url and headers, retention, display and overlay.

Values are read from defaults, then an optional YAML file, then environment
variables (a ``.env`` file is loaded first):

- HTTPSEE_BASE_URL: Prefix for urls starting with ``/``
- HTTPSEE_BASE_HEADERS: JSON object of default headers
- HTTPSEE_KEEP_BUFFERS: Retention bound, ``none`` or empty for unbounded
- HTTPSEE_DISPLAY_ACTION: print, summary or none
- HTTPSEE_HEADERS_BUFFER: Shared buffer name for revealed headers
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ..services.buffers.factory import DEFAULT_HEADER_LINE_FIELDS
from ..services.content_types import DEFAULT_CONTENT_TYPE_RULES

ENV_PREFIX = "HTTPSEE_"


class SeeConfig(BaseModel):
    """
    Configuration surface shared by every dispatch in a session.
    """

    base_url: Optional[str] = Field(
        default=None, description="Prefix joined to urls that start with '/'"
    )
    base_headers: Dict[str, str] = Field(
        default_factory=dict, description="Default headers, overridden per request"
    )
    keep_buffers: Optional[int] = Field(
        default=10, ge=1, description="Response buffers to retain, None = unbounded"
    )
    display_action: str = Field(
        default="print", description="How new response buffers are shown"
    )
    content_type_rules: List[Tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_CONTENT_TYPE_RULES),
        description="Ordered (MIME regex, renderer key) pairs",
    )
    header_line_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_HEADER_LINE_FIELDS),
        description="Ordered overlay segment keys",
    )
    headers_buffer: Optional[str] = Field(
        default=None, description="Shared buffer for revealed headers, None = inline"
    )

    @field_validator("base_url")
    @classmethod
    def _empty_base_url(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("keep_buffers", mode="before")
    @classmethod
    def _parse_keep_buffers(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in ("", "none", "null"):
            return None
        return value

    @classmethod
    def load(
        cls,
        config_path: Union[str, Path, None] = None,
        env: Optional[Dict[str, str]] = None,
        **overrides: Any,
    ) -> "SeeConfig":
        """
        Build a config from YAML, environment and explicit overrides.

        Args:
            config_path: Optional YAML file
            env: Environment mapping, defaults to ``os.environ`` after ``.env``
            **overrides: Highest-precedence field values (None is ignored)

        Raises:
            FileNotFoundError: If ``config_path`` does not exist
            ValueError: If the YAML or a JSON env value is malformed
        """
        if env is None:
            load_dotenv()
            env = dict(os.environ)

        data: Dict[str, Any] = {}
        if config_path is not None:
            data.update(_load_yaml(Path(config_path)))
        data.update(_env_values(env))
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}")
    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return loaded


def _env_values(env: Dict[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for field_name in ("base_url", "keep_buffers", "display_action", "headers_buffer"):
        key = ENV_PREFIX + field_name.upper()
        if key in env:
            values[field_name] = env[key]

    raw_headers = env.get(ENV_PREFIX + "BASE_HEADERS")
    if raw_headers:
        try:
            headers = json.loads(raw_headers)
        except json.JSONDecodeError as e:
            raise ValueError(f"{ENV_PREFIX}BASE_HEADERS is not valid JSON: {e}")
        values["base_headers"] = headers
    return values
