################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import contextlib
import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Iterator
from typing import Mapping

import numpy as np

from oasis_math.storage_layout import StorageLayout


_LOG: logging.Logger = logging.getLogger(__name__)

# Environment switches read once when the package is imported
ENV_ROW_MAJOR_STORAGE: str = "OASIS_MATH_ROW_MAJOR_STORAGE"
ENV_DISABLE_AUTO_INIT: str = "OASIS_MATH_DISABLE_AUTO_INIT"
ENV_ENABLE_SWIZZLE: str = "OASIS_MATH_ENABLE_SWIZZLE"
ENV_DISABLE_BOUNDS_CHECKS: str = "OASIS_MATH_DISABLE_BOUNDS_CHECKS"
ENV_REAL_DOUBLE: str = "OASIS_MATH_REAL_DOUBLE"

_TRUE_STRINGS: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS: frozenset[str] = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class MathConfig:
    """Switches controlling how vectors and matrices are built.

    Responsibility:
        Hold the options that C-style math libraries expose as build-time
        defines, validated and immutable.

    Data contract:
        - storage_layout: default physical layout for matrix types that do
          not name one explicitly.
        - auto_init: zero-fill on default construction. When off, default
          construction leaves contents indeterminate.
        - swizzle: enable multi-component accessors such as ``v.zyx``.
        - bounds_checks: validate element and component indices.
        - real_dtype: scalar type behind the ``Real`` aliases, float32 or
          float64.

    Binding:
        - storage_layout and real_dtype are bound when a type is specialized,
          so changing them only affects types created afterwards.
        - auto_init, swizzle and bounds_checks are read on every call.
    """

    storage_layout: StorageLayout
    auto_init: bool
    swizzle: bool
    bounds_checks: bool
    real_dtype: np.dtype

    @staticmethod
    def defaults() -> MathConfig:
        """Return the default configuration."""
        config: MathConfig = MathConfig(
            storage_layout=StorageLayout.COLUMN_MAJOR,
            auto_init=True,
            swizzle=False,
            bounds_checks=__debug__,
            real_dtype=np.dtype(np.float32),
        )
        config.validate()
        return config

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> MathConfig:
        """Construct a configuration from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        field_names: list[str] = [field.name for field in dataclasses.fields(cls)]
        unknown_keys: list[str] = sorted(set(params.keys()) - set(field_names))
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: MathConfig = cls.defaults()
        config: MathConfig = cls(
            storage_layout=StorageLayout.parse(
                params.get("storage_layout", defaults.storage_layout)  # type: ignore[arg-type]
            ),
            auto_init=cls._as_bool(
                "auto_init", params.get("auto_init", defaults.auto_init)
            ),
            swizzle=cls._as_bool("swizzle", params.get("swizzle", defaults.swizzle)),
            bounds_checks=cls._as_bool(
                "bounds_checks", params.get("bounds_checks", defaults.bounds_checks)
            ),
            real_dtype=cls._as_dtype(
                "real_dtype", params.get("real_dtype", defaults.real_dtype)
            ),
        )
        config.validate()
        return config

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MathConfig:
        """Construct a configuration from OASIS_MATH_* environment variables."""
        env: Mapping[str, str] = os.environ if environ is None else environ
        defaults: MathConfig = cls.defaults()

        row_major: bool = cls._env_flag(env, ENV_ROW_MAJOR_STORAGE)
        real_double: bool = cls._env_flag(env, ENV_REAL_DOUBLE)
        config: MathConfig = cls(
            storage_layout=(
                StorageLayout.ROW_MAJOR if row_major else defaults.storage_layout
            ),
            auto_init=not cls._env_flag(env, ENV_DISABLE_AUTO_INIT),
            swizzle=cls._env_flag(env, ENV_ENABLE_SWIZZLE),
            bounds_checks=(
                defaults.bounds_checks
                and not cls._env_flag(env, ENV_DISABLE_BOUNDS_CHECKS)
            ),
            real_dtype=(
                np.dtype(np.float64) if real_double else defaults.real_dtype
            ),
        )
        config.validate()
        _LOG.debug("Loaded math config from environment: %s", config.as_dict())
        return config

    def validate(self) -> None:
        """Validate configuration and raise ValueError on failure."""
        if not isinstance(self.storage_layout, StorageLayout):
            raise ValueError("storage_layout must be a StorageLayout")
        for name in ("auto_init", "swizzle", "bounds_checks"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool")
        if self.real_dtype not in (np.dtype(np.float32), np.dtype(np.float64)):
            raise ValueError("real_dtype must be float32 or float64")

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "storage_layout": self.storage_layout.value,
            "auto_init": self.auto_init,
            "swizzle": self.swizzle,
            "bounds_checks": self.bounds_checks,
            "real_dtype": self.real_dtype.name,
        }

    @staticmethod
    def _as_bool(name: str, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered: str = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise ValueError(f"{name} must be a bool")

    @staticmethod
    def _as_dtype(name: str, value: object) -> np.dtype:
        try:
            return np.dtype(value)  # type: ignore[call-overload]
        except TypeError as exc:
            raise ValueError(f"{name} must name a numpy scalar type") from exc

    @staticmethod
    def _env_flag(env: Mapping[str, str], key: str) -> bool:
        raw: str = env.get(key, "")
        return MathConfig._as_bool(key, raw)


_config: MathConfig = MathConfig.from_env()


def get_config() -> MathConfig:
    """Return the active configuration."""
    return _config


def set_config(config: MathConfig) -> None:
    """Replace the active configuration."""
    global _config
    if not isinstance(config, MathConfig):
        raise ValueError("config must be a MathConfig")
    config.validate()
    _config = config


@contextlib.contextmanager
def override(**fields: object) -> Iterator[MathConfig]:
    """Temporarily replace fields of the active configuration."""
    previous: MathConfig = get_config()
    params: dict[str, object] = previous.as_dict()
    params.update(fields)
    set_config(MathConfig.from_dict(params))
    try:
        yield get_config()
    finally:
        set_config(previous)
