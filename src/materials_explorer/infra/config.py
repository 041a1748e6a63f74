from __future__ import annotations

import os

DEFAULT_RESULT_WINDOW_SIZE = 12


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def catalog_path() -> str | None:
    return os.getenv("MATERIALS_CATALOG_PATH") or None


def result_window_size() -> int:
    raw = os.getenv("RESULT_WINDOW_SIZE")

    if not raw:
        return DEFAULT_RESULT_WINDOW_SIZE

    try:
        size = int(raw)
    except ValueError:
        raise RuntimeError(f"RESULT_WINDOW_SIZE must be an integer, got '{raw}'") from None

    if size <= 0:
        raise RuntimeError("RESULT_WINDOW_SIZE must be > 0")

    return size


def random_seed() -> int | None:
    raw = os.getenv("RANDOM_SEED")

    if not raw:
        return None

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"RANDOM_SEED must be an integer, got '{raw}'") from None
