# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Core types shared by every BlockShade package."""

from blockshade.core.types import BASEDMODEL_CONFIG, FROZEN_BASEDMODEL_CONFIG, BaseEnum, BasedModel


__all__ = ("BASEDMODEL_CONFIG", "FROZEN_BASEDMODEL_CONFIG", "BaseEnum", "BasedModel")
