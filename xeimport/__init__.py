"""
xeimport - Extended Events Session Provisioning

Creates SQL Server Extended Events sessions on one or more servers from
reusable XML templates.

Architecture:
- Each module is self-contained with clear interfaces
- The host database client is plugged in through a connector
- No module knows the internals of another

Modules:
- config: Configuration loading (env, .env, YAML)
- store: Session store and connector interfaces
- template: Template resolution and document handling
- provisioning: Per (server, template) provisioning workflow
- batch: Request validation and server x template fan-out
"""

__version__ = "1.0.0"
