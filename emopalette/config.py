"""
Load and expose app config (YAML). Used by the CLI for export format, PNG size and location, and log level.
The generation core never reads config.
"""
import re
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "export": {
            "format": "css",
            "png": {"width": 500, "height": 100},
        },
        "output": {"dir": "output"},
        "logging": {"level": "WARNING"},
    }


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output", {})
    d = out.get("dir", "output")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p


def get_png_size(config: dict[str, Any]) -> tuple[int, int]:
    """(width, height) for PNG swatch export."""
    png = config.get("export", {}).get("png", {}) or {}
    return int(png.get("width", 500)), int(png.get("height", 100))


def png_output_path(config: dict[str, Any], text: str, path: Path | None = None) -> Path:
    """
    Where to write a PNG export. An explicit path is used as given;
    otherwise output.dir/palette_<slug>.png, slug taken from the text.
    """
    if path is not None:
        return Path(path)
    slug = re.sub(r"[^a-z0-9]+", "_", (text or "").lower()).strip("_") or "random"
    return get_output_dir(config) / f"palette_{slug}.png"
