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


class ParseError(ValueError):
    """A string (or component list) is not a dotted-integer version."""


class SelectionError(ValueError):
    """Raised when one of the candidate versions cannot be parsed.

    The offending literal is available as ``literal``; the underlying
    ParseError is chained as ``__cause__``.
    """

    def __init__(self, literal: str, reason: str):
        super().__init__(f"cannot select latest version: {literal!r}: {reason}")
        self.literal = literal


class TransportError(RuntimeError):
    """Listing the remote references failed."""
