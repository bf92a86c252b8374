"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the playstyle checker.

    Values are read from ``PLAYSTYLE_``-prefixed environment variables and
    from a ``.env`` file in the working directory.  List and mapping values
    are given as JSON, e.g. ``PLAYSTYLE_BOOLEAN_KEYS='["become"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLAYSTYLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "WARNING"
    output_format: str = "text"
    max_workers: int = 4

    # Loader safety limits
    max_document_size: int = 5_000_000  # characters
    max_node_count: int = 50_000
    max_depth: int = 64

    # Rule options
    boolean_keys: list[str] = Field(
        default_factory=lambda: [
            "any_errors_fatal",
            "become",
            "check_mode",
            "diff",
            "enabled",
            "force",
            "gather_facts",
            "ignore_errors",
            "ignore_unreachable",
            "no_log",
            "run_once",
            "update_cache",
        ]
    )
    free_form_keys: list[str] = Field(
        default_factory=lambda: [
            "ansible.builtin.command",
            "ansible.builtin.raw",
            "ansible.builtin.script",
            "ansible.builtin.shell",
            "changed_when",
            "command",
            "failed_when",
            "msg",
            "name",
            "raw",
            "script",
            "shell",
            "until",
            "when",
            "win_command",
            "win_shell",
        ]
    )
    quoting_exempt_keys: list[str] = Field(default_factory=list)
    numeric_string_keys: list[str] = Field(default_factory=lambda: ["mode", "version"])
    deprecated_escalation_keys: dict[str, str] = Field(
        default_factory=lambda: {
            "sudo": "become",
            "sudo_user": "become_user",
            "su": "become",
            "su_user": "become_user",
        }
    )
