"""Core services for create-interwoven-app."""

from .config import ConfigurationError, ScaffoldConfig, load_config
from .fs import DirEntry, FileSystem, LocalFileSystem
from .installers import InstallerError, InstallerResult, install_dependencies
from .logs import LogEntry, ScaffoldLogger
from .naming import to_camel_case, to_kebab_case, to_pascal_case
from .project import ProjectCreator, ProjectSummary
from .replacements import build_replacements
from .results import OperationError, Result, capture
from .templates import (
    TemplateCopyError,
    TemplateError,
    TemplateNotFoundError,
    TemplateWalker,
    TemplateWriteError,
    available_templates,
    copy_template,
)
from .validators import (
    ValidationOutcome,
    validate_network,
    validate_project_name,
    validate_target_directory,
    validate_template,
)

__all__ = [
    "ConfigurationError",
    "ScaffoldConfig",
    "load_config",
    "DirEntry",
    "FileSystem",
    "LocalFileSystem",
    "InstallerError",
    "InstallerResult",
    "install_dependencies",
    "LogEntry",
    "ScaffoldLogger",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "ProjectCreator",
    "ProjectSummary",
    "build_replacements",
    "OperationError",
    "Result",
    "capture",
    "TemplateCopyError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateWalker",
    "TemplateWriteError",
    "available_templates",
    "copy_template",
    "ValidationOutcome",
    "validate_network",
    "validate_project_name",
    "validate_target_directory",
    "validate_template",
]
