"""
config.py — Paths and reveal probabilities.

Paths default to ~/.claude/ and may be overridden with ICHING_DAILY_HOME
(directory) or ICHING_DAILY_CACHE / ICHING_DAILY_HISTORY (files).
"""

from __future__ import annotations
import os
from pathlib import Path

# === Storage ===
DEFAULT_HOME_DIRNAME = ".claude"
CACHE_FILENAME = "iching.json"
HISTORY_FILENAME = "iching.jsonl"


def data_home() -> Path:
    override = os.environ.get("ICHING_DAILY_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_HOME_DIRNAME


def cache_path() -> Path:
    override = os.environ.get("ICHING_DAILY_CACHE")
    return Path(override).expanduser() if override else data_home() / CACHE_FILENAME


def history_path() -> Path:
    override = os.environ.get("ICHING_DAILY_HISTORY")
    return Path(override).expanduser() if override else data_home() / HISTORY_FILENAME


# === Reveal probabilities ===
# Each commentary style of the primary gets one band, then each derived
# type in order: nuclear, shadow, mirror, becoming. Whatever is left of
# [0, 1) is silence.
STYLE_BAND = 0.04
DERIVED_BAND = 0.025

# First reading of the day always uses the Great Image (大象傳)
FIRST_READING_STYLE = "image_zh"

# === Labels ===
SELF_MIRROR_TAGS = ("自綜", "self-mirroring")
LOCKED_PAIR_LABEL = "錯綜卦 (shadow is mirror)"
