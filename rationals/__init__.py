# SPDX-FileCopyrightText: 2025 rationals contributors
# SPDX-License-Identifier: Apache-2.0

from .rational import *
from .version import version as __version__
