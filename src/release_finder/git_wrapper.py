# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import TransportError
from .gh_logging import Logger

log = Logger(__name__)

GIT_ENV_VAR = "RELEASE_FINDER_GIT"


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


@dataclass(frozen=True)
class GitConfig:
    git_binary: Path

    @classmethod
    def discover(cls, explicit: str | None = None) -> "GitConfig":
        """Locate the git binary.

        Tries sources in order:
        1. explicit path (e.g. --git CLI argument)
        2. RELEASE_FINDER_GIT environment variable
        3. `git` on PATH
        """
        if explicit:
            candidate, origin = explicit, "command-line argument"
        elif env := os.getenv(GIT_ENV_VAR):
            candidate, origin = env, f"${GIT_ENV_VAR}"
        else:
            found = shutil.which("git")
            if not found:
                raise TransportError("git binary not found on PATH")
            candidate, origin = found, "PATH"

        path = Path(candidate)
        if not _is_executable(path):
            raise TransportError(f"{path} (from {origin}) is not an executable file")

        log.debug(f"Using git binary {path} from {origin}.")
        return cls(git_binary=path)


class GitTagSource:
    """Lists remote tags by running `git ls-remote --tags`."""

    def __init__(self, config: GitConfig):
        self.config = config

    def list_tags(self, url: str) -> str:
        cmd = [str(self.config.git_binary), "ls-remote", "--tags", url]
        log.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, check=True)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip()
            raise TransportError(
                f"git ls-remote {url} failed with exit code {e.returncode}: {stderr}"
            ) from e
        except OSError as e:
            raise TransportError(f"could not run {cmd[0]}: {e}") from e

        return result.stdout.decode("utf-8", errors="replace")


class FileTagSource:
    """Serves previously saved `git ls-remote` output; the url is ignored."""

    def __init__(self, path: Path):
        self.path = path

    def list_tags(self, url: str) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise TransportError(f"could not read tags from {self.path}: {e}") from e
