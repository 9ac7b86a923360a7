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
from pathlib import Path

import pytest

from src.release_finder import RemoteTag
from src.release_finder.gh_logging import Logger

MASTER_SHA = "386f2a698332b61278883df6f97d79eb98fe3f29"
TAG_SHA = "a839bf2d274aaecd509b51ec37cb51842d4de348"


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
        elif prefix == "error":
            self.error_messages.append(msg)


class FakeTagSource:
    """In-memory tag source recording the urls it was asked for."""

    def __init__(self, output: str):
        self.output = output
        self.calls: list[str] = []

    def list_tags(self, url: str) -> str:
        self.calls.append(url)
        return self.output


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


def make_ls_remote_output(*ref_names: str, sha: str = TAG_SHA) -> str:
    """Factory for `git ls-remote` output, one line per reference."""
    return "".join(
        RemoteTag(commit_id=sha, ref_name=name).to_line() + "\n" for name in ref_names
    )


@pytest.fixture
def mixed_refs_output() -> str:
    """Branches, prefixed tags and a bare version ref, as in a real repository."""
    return (
        f"{MASTER_SHA}\trefs/heads/master\n"
        f"{TAG_SHA}\trefs/tags/test01\n"
        f"{TAG_SHA}\trefs/tags/test02\n"
        f"{MASTER_SHA}\t1.2.3\n"
    )
