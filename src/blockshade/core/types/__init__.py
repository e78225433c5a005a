# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Base enums and models used throughout the BlockShade project."""

from blockshade.core.types.enum import BaseEnum
from blockshade.core.types.models import BASEDMODEL_CONFIG, FROZEN_BASEDMODEL_CONFIG, BasedModel


__all__ = ("BASEDMODEL_CONFIG", "FROZEN_BASEDMODEL_CONFIG", "BaseEnum", "BasedModel")
