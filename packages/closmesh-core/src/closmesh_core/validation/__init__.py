from .config import clos_config_issues, format_issues, mesh_config_issues

__all__ = ["clos_config_issues", "format_issues", "mesh_config_issues"]
