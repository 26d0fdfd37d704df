from __future__ import annotations

"""Errors raised while reading decision tree files."""

import os
from typing import Iterable

from pydantic import ValidationError
from yaml import YAMLError


class LoaderError(RuntimeError):
    """Wraps tree file failures with file path context."""

    MAX_DETAILS = 3

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = str(file_path)
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        base = f"{self.message} ({self._relative_path(self.file_path)})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if isinstance(self.cause, YAMLError):
            # first line carries the parser's complaint, the rest is position context
            return f"{base}: {str(self.cause).splitlines()[0]}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _relative_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - different drive on Windows
            return path

    @classmethod
    def _format_validation_errors(cls, errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets = []
        for err in error_list[: cls.MAX_DETAILS]:
            loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
            msg = err.get("msg") or err.get("type") or "validation error"
            snippets.append(f"{loc}: {msg}")
        remaining = len(error_list) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["LoaderError"]
