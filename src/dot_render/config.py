"""Configuration management for dot-render projects."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dot_render.models import RenderConfig

logger = logging.getLogger(__name__)

DOT_RENDER_DIR = ".dot-render"
CONFIG_FILE = "config.json"


def _config_path(project_root: Path) -> Path:
    return project_root / DOT_RENDER_DIR / CONFIG_FILE


def save_config(config: RenderConfig, project_root: Path) -> Path:
    """Save render config to .dot-render/config.json. Returns the config path."""
    config_dir = project_root / DOT_RENDER_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    path = _config_path(project_root)
    data = {
        "width": config.width,
        "ribbon": config.ribbon,
        "indent": config.indent,
        "strict": config.strict,
    }
    path.write_text(json.dumps(data, indent=2) + "\n")
    logger.debug("Saved config to %s", path)
    return path


def load_config(project_root: Path) -> RenderConfig:
    """Load render config from .dot-render/config.json."""
    path = _config_path(project_root)
    if not path.exists():
        raise FileNotFoundError(f"No config found at {path}")
    data = json.loads(path.read_text())
    defaults = RenderConfig()
    return RenderConfig(
        width=data.get("width", defaults.width),
        ribbon=data.get("ribbon", defaults.ribbon),
        indent=data.get("indent", defaults.indent),
        strict=data.get("strict", defaults.strict),
    )


def is_initialized(project_root: Path) -> bool:
    """Check if the project has a dot-render config."""
    return _config_path(project_root).exists()


def resolve_config(project_root: Path) -> RenderConfig:
    """The project's config if it has one, the defaults otherwise."""
    if is_initialized(project_root):
        return load_config(project_root)
    return RenderConfig()
