# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from collections.abc import Iterable
from dataclasses import dataclass

from cargo_get.config import default_config


@dataclass(frozen=True)
class Delimiter:
    separator: str

    @staticmethod
    def parse(
        value: str | None,
        symbolic_delimiters: dict[str, str] = default_config.symbolic_delimiters,
    ) -> "Delimiter":
        """
        Build a Delimiter from the --delimiter option.

        Symbolic names (Tab, CR, LF, CRLF) map to their control characters,
        anything else is used verbatim. Without a value, values are separated
        by newlines.
        """
        if value is None:
            return Delimiter(default_config.default_delimiter)
        return Delimiter(symbolic_delimiters.get(value, value))

    def join(self, values: Iterable[str]) -> str:
        return self.separator.join(values)
