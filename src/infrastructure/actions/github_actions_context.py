"""GitHub Actions Context Implementation"""
from __future__ import annotations

import os
import sys
from typing import Mapping, TextIO
from uuid import uuid4

import structlog

from src.application.ports.action_context import (
    IActionContext,
    LogLevel,
    MissingRequiredInputError,
)

logger = structlog.get_logger()

_COMMANDS = {
    LogLevel.DEBUG: "debug",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
}


def escape_data(value: str) -> str:
    """ワークフローコマンドのデータ部をエスケープ"""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsContext(IActionContext):
    """
    GitHub Actions Context

    INPUT_* 環境変数から入力を読み、GITHUB_OUTPUT ファイルに出力を書き、
    ワークフローコマンドでログと失敗を通知する。
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        stream: TextIO | None = None,
    ):
        self._environ = environ if environ is not None else os.environ
        self._stream = stream
        self.exit_code = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def get_input(self, name: str, required: bool = False) -> str:
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        value = self._environ.get(key, "").strip()

        if required and not value:
            raise MissingRequiredInputError(f"Input required and not supplied: {name}")

        return value

    def set_output(self, name: str, value: str) -> None:
        output_file = self._environ.get("GITHUB_OUTPUT", "")

        if not output_file:
            self._issue("set-output", value, name=name)
            return

        delimiter = f"ghadelimiter_{uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: name or value contains the delimiter {delimiter}")

        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

        logger.debug("output_set", name=name)

    def log(self, level: LogLevel, message: str) -> None:
        command = _COMMANDS.get(level)
        if command is None:
            self.stream.write(f"{message}\n")
            self.stream.flush()
            return

        self._issue(command, message)

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self.log(LogLevel.ERROR, message)

    def _issue(self, command: str, message: str, **properties: str) -> None:
        line = f"::{command}"
        if properties:
            line += " " + ",".join(
                f"{key}={escape_property(value)}" for key, value in properties.items()
            )
        line += f"::{escape_data(message)}"

        self.stream.write(f"{line}\n")
        self.stream.flush()
