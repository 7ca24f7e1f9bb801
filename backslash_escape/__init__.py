# File: backslash_escape/__init__.py
# LLM NOTE: LLM Editor, follow these code style guidelines: (1) No docstrings or extra comments; (2) Retain the file path comment, LLM note, and grouping/separation markers exactly as is; (3) Favor concise single-line statements; (4) Preserve code structure and organization.

from backslash_escape.models.escape_style import EscapeStyle, UnknownEscapeStyleError
from backslash_escape.utils.escape_utils import escape, unescape, count_escapable, needs_escape, is_printable_ascii, encode, decode

__version__ = "0.1.0"
__all__ = ["escape", "unescape", "count_escapable", "needs_escape", "is_printable_ascii", "encode", "decode", "EscapeStyle", "UnknownEscapeStyleError"]
