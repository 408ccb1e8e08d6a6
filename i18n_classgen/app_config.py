"""Application configuration module for the translation class generator."""
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from i18n_classgen.logging_config import setup_logger


@dataclass
class AppConfig:
    """Application configuration dataclass."""
    # Core paths
    project_root: str
    interfaces_file: str

    # Translation file lookup; the explicit root wins over the class output directory
    translation_files_path: Optional[str]
    class_output_dir: str

    # Emission
    generated_sources_dir: str
    dry_run: bool

    logger: Optional[logging.Logger] = None


def _compute_project_root() -> str:
    """Compute the project root directory."""
    script_real_path = os.path.realpath(__file__)
    script_dir = os.path.dirname(script_real_path)
    return os.path.abspath(os.path.join(script_dir, os.pardir))


def _load_dotenv_files(project_root: str) -> None:
    """Load .env files from project root or docker directory."""
    dotenv_path_project_root = os.path.join(project_root, '.env')
    dotenv_path_docker_dir = os.path.join(project_root, 'docker', '.env')

    if os.path.exists(dotenv_path_project_root):
        load_dotenv(dotenv_path_project_root)
    elif os.path.exists(dotenv_path_docker_dir):
        load_dotenv(dotenv_path_docker_dir)


def _load_yaml_config(project_root: str) -> Dict[str, Any]:
    """Load YAML configuration file with enhanced error handling and path resolution."""
    # If CLASSGEN_CONFIG_FILE is set (potentially from .env), use it; otherwise, default to 'config.yaml'.
    default_config_path = os.path.join(project_root, 'config.yaml')
    config_file = os.environ.get('CLASSGEN_CONFIG_FILE', default_config_path)

    # Ensure we have an absolute path for better error reporting
    if not os.path.isabs(config_file):
        config_file = os.path.abspath(config_file)

    config = {}
    try:
        if not os.path.exists(config_file):
            print(f"Warning: Configuration file '{config_file}' not found. Using default configuration.",
                  file=sys.stderr)
            print(f"Tip: Create a config.yaml file in '{project_root}' or set CLASSGEN_CONFIG_FILE environment variable.",
                  file=sys.stderr)
            return config

        with open(config_file, 'r', encoding='utf-8') as config_file_stream:
            loaded_config = yaml.safe_load(config_file_stream)
            if loaded_config is None:
                print(f"Warning: Configuration file '{config_file}' is empty. Using default configuration.",
                      file=sys.stderr)
            elif isinstance(loaded_config, dict):
                config = loaded_config
                print(f"Successfully loaded configuration from: {config_file}", file=sys.stderr)
            else:
                print(f"Error: Configuration file '{config_file}' must contain a YAML dictionary. Using defaults.",
                      file=sys.stderr)

    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file '{config_file}': {e}", file=sys.stderr)
        print("Please check your YAML syntax. Using default configuration.", file=sys.stderr)
    except OSError as e:
        print(f"Error: Could not read configuration file '{config_file}': {e}", file=sys.stderr)
        print("Using default configuration.", file=sys.stderr)

    return config


def _setup_logger_from_config(config: Dict[str, Any]) -> logging.Logger:
    """Set up logger based on configuration."""
    log_config = config.get('logging') or {}
    log_level_str = log_config.get('log_level', 'INFO').upper()
    log_file_path = log_config.get('log_file_path', 'logs/classgen.log')
    log_to_console = log_config.get('log_to_console', True)
    return setup_logger(log_level_str, log_file_path, log_to_console)


def _log_dotenv_status(logger: logging.Logger, project_root: str) -> None:
    """Log the status of .env file loading."""
    dotenv_path_project_root = os.path.join(project_root, '.env')
    dotenv_path_docker_dir = os.path.join(project_root, 'docker', '.env')

    if os.path.exists(dotenv_path_project_root):
        logger.info("Loaded environment variables from: %s", dotenv_path_project_root)
    elif os.path.exists(dotenv_path_docker_dir):
        logger.info("Loaded environment variables from: %s", dotenv_path_docker_dir)
    else:
        logger.debug("No .env file found in project root or in docker/; relying on system environment variables.")


def _resolve_path(project_root: str, path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    if os.path.isabs(path):
        return path
    return os.path.join(project_root, path)


def load_app_config() -> AppConfig:
    """
    Load application configuration from YAML file and environment variables.

    Relative paths are resolved against the project root. The
    ``TRANSLATION_FILES_PATH`` environment variable overrides the
    ``translation_files_path`` setting.

    Returns:
        AppConfig: The loaded application configuration.
    """
    project_root = _compute_project_root()
    _load_dotenv_files(project_root)
    config = _load_yaml_config(project_root)

    logger = _setup_logger_from_config(config)
    _log_dotenv_status(logger, project_root)

    translation_files_path = os.environ.get('TRANSLATION_FILES_PATH', config.get('translation_files_path'))

    return AppConfig(
        project_root=project_root,
        interfaces_file=_resolve_path(project_root, config.get('interfaces_file', 'interfaces.yaml')),
        translation_files_path=_resolve_path(project_root, translation_files_path),
        class_output_dir=_resolve_path(project_root, config.get('class_output_dir', 'target/classes')),
        generated_sources_dir=_resolve_path(project_root,
                                            config.get('generated_sources_dir', 'target/generated-sources')),
        dry_run=config.get('dry_run', False),
        logger=logger,
    )
