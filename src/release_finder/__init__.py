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

from dataclasses import dataclass

from .errors import ParseError, SelectionError, TransportError
from .version import Ordering, Version, compare

__version__ = "0.3.1"


@dataclass(frozen=True)
class RemoteTag:
    """One line of `git ls-remote` output."""

    commit_id: str
    ref_name: str

    def to_line(self) -> str:
        return f"{self.commit_id}\t{self.ref_name}"


__all__ = [
    "Ordering",
    "ParseError",
    "RemoteTag",
    "SelectionError",
    "TransportError",
    "Version",
    "compare",
]
