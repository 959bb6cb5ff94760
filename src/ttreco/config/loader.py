"""Loads YAML configuration files of discriminator jobs.

The configuration language is plain YAML with three additions:

- `key: !include file.yaml` loads another file inline, under `key`;
- a top-level `include: base.yaml` (or a list of files) loads base
  configurations first, which the current file then overrides;
- top-level dotted keys override nested values, e.g.
  `post.chi2.mthad_sigma: 20`.

Include paths are resolved relative to the including file. An include cycle,
through either mechanism, raises a :class:`ConfigCycleError`.
"""

import os
import re
from copy import deepcopy
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import ConfigCycleError, ConfigIncludeError, ConfigPathError

__all__ = ["load_config", "load_config_str"]

# Pattern to match: "key.path.here" for dot notation keys
DOTTED_KEY = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*(?:\.[a-zA-Z_][a-zA-Z0-9_]*)+$")


class ConfigLoader(yaml.SafeLoader):
    """YAML loader with !include tag support."""

    def __init__(
        self,
        stream,
        root_dir: Optional[str] = None,
        include_stack: Optional[List[str]] = None,
    ):
        """Initialize the loader.

        Parameters
        ----------
        stream : Union[TextIO, str]
            File stream (from `open()`) or configuration string
        root_dir : str, optional
            Directory against which `!include` paths are resolved. Defaults to
            the directory of the stream file, if any, else the current one.
        include_stack : List[str], optional
            Absolute paths of the files currently being loaded, outermost first
        """
        if root_dir is None:
            name = getattr(stream, "name", None)
            root_dir = os.path.dirname(os.path.abspath(name)) if name else os.getcwd()
        self._root = root_dir
        self._include_stack = list(include_stack or [])
        super().__init__(stream)

    def include(self, node: yaml.Node) -> Any:
        """Load and include a YAML file inline.

        Parameters
        ----------
        node : yaml.Node
            YAML node containing the filename

        Returns
        -------
        Any
            Loaded configuration content
        """
        filename = os.path.abspath(
            os.path.join(self._root, self.construct_scalar(node))
        )
        if filename in self._include_stack:
            raise ConfigCycleError(self._include_stack + [filename])
        if not os.path.isfile(filename):
            raise ConfigIncludeError(f"Included file not found: {filename}")

        with open(filename, "r", encoding="utf-8") as f:
            return parse(
                f, os.path.dirname(filename), self._include_stack + [filename]
            )


# Add the include constructor
ConfigLoader.add_constructor("!include", ConfigLoader.include)


def parse(
    stream, root_dir: Optional[str] = None, include_stack: Optional[List[str]] = None
) -> Any:
    """Parse one YAML document with a :class:`ConfigLoader`.

    Parameters
    ----------
    stream : Union[TextIO, str]
        File stream or configuration string
    root_dir : str, optional
        Directory against which `!include` paths are resolved
    include_stack : List[str], optional
        Absolute paths of the files currently being loaded

    Returns
    -------
    Any
        Parsed YAML content
    """
    loader = ConfigLoader(stream, root_dir, include_stack)
    try:
        return loader.get_single_data()
    finally:
        loader.dispose()


def deep_merge(base_dict: Dict[str, Any], override_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override_dict into base_dict.

    Parameters
    ----------
    base_dict : Dict[str, Any]
        Base dictionary
    override_dict : Dict[str, Any]
        Override dictionary

    Returns
    -------
    Dict[str, Any]
        Merged dictionary (new copy)
    """
    result = deepcopy(base_dict)

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def set_nested_value(config: Dict[str, Any], key_path: str, value: Any) -> Dict[str, Any]:
    """Set a nested value in a dictionary using dot notation.

    Parameters
    ----------
    config : Dict[str, Any]
        Configuration dictionary to modify in place
    key_path : str
        Dot-separated path to the key (e.g., "post.chi2.mthad_mean")
    value : Any
        Value to set

    Returns
    -------
    Dict[str, Any]
        Modified configuration dictionary
    """
    keys = key_path.split(".")
    current = config

    # Navigate to the parent of the target key
    for key in keys[:-1]:
        if key not in current or current[key] is None:
            current[key] = {}
        elif not isinstance(current[key], dict):
            raise ConfigPathError(
                f"Cannot set '{key_path}': '{key}' is not a dictionary."
            )
        current = current[key]

    current[keys[-1]] = value

    return config


def extract_includes_and_overrides(
    config_dict: Dict[str, Any]
) -> Tuple[List[str], Dict[str, Any], Dict[str, Any]]:
    """Extract include directives and dot-notation overrides from a config dict.

    Parameters
    ----------
    config_dict : Dict[str, Any]
        Loaded YAML configuration dictionary

    Returns
    -------
    Tuple[List[str], Dict[str, Any], Dict[str, Any]]
        (included files, overrides, cleaned configuration)
    """
    includes, overrides, cleaned_config = [], {}, {}
    for key, value in config_dict.items():
        if key == "include":
            if isinstance(value, str):
                includes.append(value)
            elif isinstance(value, list):
                includes.extend(value)
            else:
                raise ConfigIncludeError(
                    f"'include' must be a string or list of strings, got {type(value)}"
                )
        elif DOTTED_KEY.match(key):
            overrides[key] = value
        else:
            cleaned_config[key] = value

    return includes, overrides, cleaned_config


def _resolve(
    main_config: Optional[Dict[str, Any]], root_dir: str, include_stack: List[str]
) -> Dict[str, Any]:
    """Apply the includes and overrides of an already parsed configuration."""
    if main_config is None:
        return {}
    if not isinstance(main_config, dict):
        raise ConfigIncludeError(
            f"A configuration must be a dictionary, got {type(main_config).__name__}."
        )

    includes, overrides, cleaned_config = extract_includes_and_overrides(main_config)

    # Load all included files first (in order)
    config = {}
    for include_file in includes:
        include_path = os.path.join(root_dir, include_file)
        config = deep_merge(config, _load_recursive(include_path, include_stack))

    # Merge the main config, then apply the dotted overrides
    config = deep_merge(config, cleaned_config)
    for key_path, value in overrides.items():
        config = set_nested_value(config, key_path, value)

    return config


def _load_recursive(cfg_path: str, include_stack: List[str]) -> Dict[str, Any]:
    """Recursively load a configuration file with cycle detection."""
    cfg_path = os.path.abspath(cfg_path)
    if cfg_path in include_stack:
        raise ConfigCycleError(include_stack + [cfg_path])

    root_dir, include_stack = os.path.dirname(cfg_path), include_stack + [cfg_path]
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            main_config = parse(f, root_dir, include_stack)
    except FileNotFoundError as exc:
        raise ConfigIncludeError(f"Configuration file not found: {cfg_path}") from exc

    return _resolve(main_config, root_dir, include_stack)


def load_config(cfg_path: str) -> Dict[str, Any]:
    """Load a configuration file to a dictionary.

    Parameters
    ----------
    cfg_path : str
        Path to the configuration file

    Returns
    -------
    Dict[str, Any]
        Loaded and merged configuration dictionary

    Raises
    ------
    ConfigCycleError
        If circular include detected
    ConfigIncludeError
        If an included file is not found
    """
    return _load_recursive(cfg_path, [])


def load_config_str(cfg_str: str, root_dir: Optional[str] = None) -> Dict[str, Any]:
    """Load a configuration from a YAML string.

    Parameters
    ----------
    cfg_str : str
        Configuration as a YAML string
    root_dir : str, optional
        Directory against which includes are resolved (default: current)

    Returns
    -------
    Dict[str, Any]
        Loaded and merged configuration dictionary
    """
    root_dir = os.path.abspath(root_dir or os.getcwd())
    main_config = parse(cfg_str, root_dir)

    return _resolve(main_config, root_dir, [])
