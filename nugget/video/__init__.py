from .assembler import assemble, extract_parts, merge_parts, parse_intervals, render_nugget
from .formats import list_formats, select_best_format
