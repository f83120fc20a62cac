# SPDX-FileCopyrightText: 2025 rationals contributors
# SPDX-License-Identifier: Apache-2.0

from importlib.metadata import version, PackageNotFoundError

try:
    version = version("rationals")
except PackageNotFoundError:
    version = 'unknown'
