import multiprocessing as mp
import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        return default


class Config:
    """Runtime settings, grouped the way the render pipeline consumes them."""

    TMP_FOLDER: str = "./tmp"

    OUTPUT_CONFIG: dict = {
        'file': 'final.mp4',
    }

    # Captions are always requested in one fixed language
    SUBTITLE_CONFIG: dict = {
        'language': 'pt',
        'format': 'srt',
    }

    DEFAULT_INTERVALS: list = [
        ["00:01:19", "00:01:40"],
        ["00:04:30", "00:05:00"],
    ]

    FORMAT_CONFIG: dict = {
        'preferred_extension': 'mp4',
        'min_width': 1280,
    }

    RENDER_CONFIG: dict = {
        'crop': {'w': 800, 'h': 720, 'x': 240, 'y': 0},
        'pad': {'w': 'iw', 'h': 'ih+200', 'x': 0, 'y': 100, 'color': '#7159C1'},
        # None lets ffmpeg resolve a font through fontconfig
        'font_file': None,
        'font_color': 'white',
    }

    OVERLAY_CONFIG: dict = {
        'x': '(main_w/2-text_w/2)',
        'single_line_y': '(main_h-70)',
        'single_line_font_size': 48,
        'head_y': '(main_h-86)',
        'tail_y': '(main_h-44)',
        'multi_line_font_size': 36,
        'max_single_line_chars': 30,
        'wrap_search_chars': 24,
    }

    EXTRACTION_CONFIG: dict = {
        'max_workers': mp.cpu_count(),
    }


def reload_settings() -> type[Config]:
    """
    Re-reads environment overrides into Config.

    Returns:
        type[Config]: The refreshed settings holder.
    """
    Config.TMP_FOLDER = os.getenv("NUGGET_TMP_FOLDER", "./tmp")
    Config.OUTPUT_CONFIG["file"] = os.getenv("NUGGET_OUTPUT_FILE", "final.mp4")
    Config.SUBTITLE_CONFIG["language"] = os.getenv("NUGGET_SUBTITLE_LANGUAGE", "pt")
    Config.RENDER_CONFIG["font_file"] = os.getenv("NUGGET_FONT_FILE") or None
    Config.EXTRACTION_CONFIG["max_workers"] = _env_int(
        "NUGGET_MAX_WORKERS", mp.cpu_count()
    )
    return Config


reload_settings()
