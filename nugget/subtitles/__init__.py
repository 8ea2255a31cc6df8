from .normalizer import normalize_cues
from .overlay import InvalidCue, build_cue_overlays, build_overlays, to_drawtext_options
from .remapper import flatten_remapped, interval_offsets, remap_cues
from .source import SubtitleFetch, SubtitleStatus, fetch_subtitles
