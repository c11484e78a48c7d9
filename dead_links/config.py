# === FILE: dead_links/config.py ===
"""
Loading and validation of the crawler configuration.
The schema is described with Pydantic; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import urlsplit

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from dead_links import __version__
from dead_links.utils import join_path


class CrawlerConfig(BaseModel):
    """Settings for one crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Base domain; also the crawl scope prefix.")
    start: str = Field("", description="Path under the base domain to start from, e.g. /docs.")
    parallel: bool = Field(False, description="Crawl links concurrently instead of depth-first.")
    max_concurrency: Optional[int] = Field(
        None, ge=1, description="Upper bound on in-flight requests in parallel mode (None = unbounded)."
    )
    timeout: Optional[float] = Field(
        None, gt=0, description="Total timeout per request in seconds (None = client default)."
    )
    user_agent: str = Field(f"DeadLinksScout/{__version__}", min_length=1, description="User-Agent header.")
    check_external: bool = Field(
        False, description="Also fetch links outside the base domain (never crawled into)."
    )

    @field_validator("base_url", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("base_url")
    def _check_http_url(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {v!r}")
        return v

    @property
    def start_url(self) -> str:
        """The first URL to fetch: *start* joined onto the base domain."""
        return join_path(self.base_url, self.start)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a YAML or JSON config file into a plain mapping, without validation."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Build a validated CrawlerConfig from an optional YAML/JSON file.

    Keyword overrides (e.g. values given on the command line) win over the
    file; overrides that are None are ignored. A missing file raises
    FileNotFoundError, broken syntax ValueError, a non-mapping top level
    TypeError and invalid values pydantic's ValidationError.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config", "read_config_file", "ValidationError"]
