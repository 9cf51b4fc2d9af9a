"""
Theme Config Resolution

Loads a theme config file (YAML) and merges it over the default theme config,
then turns the result into RenderOptions.

Example theme.yaml:
    document_class: article
    preamble_path: my_preamble.tex
    sections: [work, education, skills]
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from jsonresume_latex.contexts.templating.logger import _log_debug
from jsonresume_latex.contexts.templating.options import RenderOptions, merge_options
from jsonresume_latex.contexts.templating.registries import TemplateRegistry
from jsonresume_latex.contexts.templating.sections import Section

load_dotenv()
THEME_CONFIG_PATH = os.getenv("JSONRESUME_LATEX_CONFIG_PATH") or None
PREAMBLE_PATH = os.getenv("JSONRESUME_LATEX_PREAMBLE_PATH") or None

DEFAULT_THEME_CONFIG = {
    "document_class": "article",
    "preamble_path": None,
    "sections": Section.names(),
}


def load_theme_config(config_path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Load a theme config file and merge it over DEFAULT_THEME_CONFIG.

    Args:
        config_path: Path to a YAML theme config (defaults to
                     JSONRESUME_LATEX_CONFIG_PATH; None means defaults only)

    Returns:
        Plain dict with document_class, preamble_path and sections. A relative
        preamble_path is resolved against the config file's directory.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config file is not a mapping or has unknown keys
    """
    if config_path is None:
        config_path = THEME_CONFIG_PATH

    base = OmegaConf.create(DEFAULT_THEME_CONFIG)
    if config_path is None:
        return OmegaConf.to_container(base, resolve=True)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Theme config not found at {config_path}")

    user_config = OmegaConf.load(config_path)
    if not isinstance(user_config, DictConfig):
        raise ValueError(
            f"Theme config {config_path} must be a mapping of "
            f"{list(DEFAULT_THEME_CONFIG)}, got a {type(user_config).__name__}"
        )

    unknown = sorted(set(user_config.keys()) - set(DEFAULT_THEME_CONFIG))
    if unknown:
        raise ValueError(
            f"Unknown theme config key(s) {unknown} in {config_path}. "
            f"Valid keys: {list(DEFAULT_THEME_CONFIG)}"
        )

    _log_debug(f"Loaded theme config from {config_path}")

    # Lists are replaced, not concatenated
    merged = OmegaConf.to_container(OmegaConf.merge(base, user_config), resolve=True)

    # Relative preamble paths are relative to the config file
    preamble_path = merged["preamble_path"]
    if preamble_path is not None and not Path(preamble_path).is_absolute():
        merged["preamble_path"] = str(config_path.parent / preamble_path)

    return merged


@lru_cache(maxsize=None)
def _packaged_preamble() -> str:
    return TemplateRegistry().read_static("structure/preamble")


def load_preamble(preamble_path: Union[str, Path, None] = None) -> str:
    """
    Load preamble text.

    Resolution order: explicit path, JSONRESUME_LATEX_PREAMBLE_PATH, then the
    packaged default preamble (which defines every environment the section
    renderers emit).

    Raises:
        FileNotFoundError: If the preamble file doesn't exist
    """
    if preamble_path is None:
        preamble_path = PREAMBLE_PATH

    if preamble_path is None:
        return _packaged_preamble().rstrip("\n")

    preamble_path = Path(preamble_path)
    if not preamble_path.exists():
        raise FileNotFoundError(f"Preamble not found at {preamble_path}")

    _log_debug(f"Loaded preamble from {preamble_path}")
    return preamble_path.read_text(encoding="utf-8").rstrip("\n")


def options_from_config(
    config: Optional[Dict[str, Any]] = None, base: RenderOptions = None
) -> RenderOptions:
    """
    Build RenderOptions from a theme config dict.

    Args:
        config: Output of load_theme_config() (defaults to load_theme_config())
        base: Options to merge onto (defaults to DEFAULT_OPTIONS)

    Returns:
        RenderOptions with document class, preamble and sections from the config

    Raises:
        UnknownSectionError: If the config lists an unknown section
    """
    if config is None:
        config = load_theme_config()

    return merge_options(
        base,
        document_class=config.get("document_class"),
        preamble=load_preamble(config.get("preamble_path")),
        sections=config.get("sections"),
    )
