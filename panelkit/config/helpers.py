"""Utility helpers shared by the panelkit configuration loader."""

from __future__ import annotations

import typing as typ

from .models import AnimationConfig, ConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_seconds(value: object | None, field: str) -> float:
    """Return ``value`` as a non-negative number of seconds."""
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        msg = f"animation.{field} must be a number of seconds, got {value!r}."
        raise ConfigError(msg)
    try:
        seconds = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"animation.{field} must be a number of seconds, got {value!r}."
        raise ConfigError(msg) from exc
    if seconds < 0:
        msg = f"animation.{field} cannot be negative, got {seconds}."
        raise ConfigError(msg)
    return seconds


def _build_animation_config(payload: object | None) -> AnimationConfig:
    """Build an AnimationConfig from the ``animation`` mapping."""
    if payload is None:
        return AnimationConfig()
    if isinstance(payload, str):
        return AnimationConfig(type=payload.strip())
    if not isinstance(payload, typ.Mapping):
        msg = "animation must be a mapping or an animation type name."
        raise ConfigError(msg)
    return AnimationConfig(
        type=_optional_str(payload.get("type")) or "",
        delay=_parse_seconds(payload.get("delay"), "delay"),
        duration=_parse_seconds(payload.get("duration"), "duration"),
    )


__all__ = ["_build_animation_config", "_optional_str", "_parse_seconds"]
