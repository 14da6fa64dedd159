from .template import RoleTemplate, load_role_template, resolve_role
from .theme import Theme, build_theme, expand, generate_vscode_theme

__all__ = [
    "RoleTemplate",
    "Theme",
    "build_theme",
    "expand",
    "generate_vscode_theme",
    "load_role_template",
    "resolve_role",
]
