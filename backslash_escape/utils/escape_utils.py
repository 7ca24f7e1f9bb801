# File: backslash_escape/utils/escape_utils.py
# LLM NOTE: LLM Editor, follow these code style guidelines: (1) No docstrings or extra comments; (2) Retain the file path comment, LLM note, and grouping/separation markers exactly as is; (3) Favor concise single-line statements; (4) Preserve code structure and organization.

from backslash_escape import config
from backslash_escape.models.escape_style import EscapeStyle

logger = config.get_logger(__name__)

# Character Classification
# ------------------------------
PRINTABLE_MIN, PRINTABLE_MAX = 32, 126
MAX_CODE_POINT = 0x10FFFF
BMP_LIMIT = 0x10000
HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)
HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
NAMED_ESCAPES = {'\\': '\\\\', '\n': '\\n', '\r': '\\r', '\t': '\\t', '\b': '\\b', '\f': '\\f', '"': '\\"'}
NAMED_UNESCAPES = {'\\': '\\', 'n': '\n', 'r': '\r', 't': '\t', 'b': '\b', 'f': '\f', '"': '"', "'": "'"}
HEX_ESCAPE_WIDTHS = {'u': 4, 'U': 8, 'x': 2}

def is_printable_ascii(ch: str) -> bool: return PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX

def needs_escape(ch: str, style=None) -> bool:
	if ch == "'": return style is None or EscapeStyle.parse(style).escapes_single_quote
	return ch in NAMED_ESCAPES or not is_printable_ascii(ch)

def split_surrogates(code: int):
	offset = code - BMP_LIMIT
	return (offset // 0x400) + 0xD800, (offset % 0x400) + 0xDC00

def join_surrogates(high: int, low: int) -> int: return BMP_LIMIT + ((high - 0xD800) * 0x400) + (low - 0xDC00)

def _resolve_style(style): return EscapeStyle.parse(config.DEFAULT_STYLE if style is None else style)

# Escape
# ------------------------------
def _escape_code_point(code, style):
	if style.uses_surrogate_pairs:
		if code < BMP_LIMIT: return f"\\u{code:04x}"
		high, low = split_surrogates(code)
		return f"\\u{high:04x}\\u{low:04x}"
	if style is EscapeStyle.PYTHON: return f"\\u{code:04x}" if code < BMP_LIMIT else f"\\U{code:08x}"
	return f"\\x{code:02x}" if code < 0x100 else f"\\u{code:04x}"

def _escape_char(ch, style):
	if ch in NAMED_ESCAPES: return NAMED_ESCAPES[ch]
	if ch == "'": return "\\'" if style.escapes_single_quote else ch
	if is_printable_ascii(ch): return ch
	return _escape_code_point(ord(ch), style)

def escape(text: str, style=None) -> str:
	resolved = _resolve_style(style)
	result = ''.join(_escape_char(ch, resolved) for ch in text)
	logger.debug("Escaped %d chars into %d chars (style=%s)", len(text), len(result), resolved)
	return result

# Unescape
# ------------------------------
def _read_hex_escape(text, pos):
	width = HEX_ESCAPE_WIDTHS.get(text[pos + 1]) if pos + 1 < len(text) and text[pos] == '\\' else None
	if width is None: return None
	digits = text[pos + 2:pos + 2 + width]
	if len(digits) < width or not all(d in HEX_DIGITS for d in digits): return None
	code = int(digits, 16)
	return (code, 2 + width) if code <= MAX_CODE_POINT else None

def unescape(text: str, recombine_surrogates=None) -> str:
	if recombine_surrogates is None: recombine_surrogates = config.RECOMBINE_SURROGATES
	result, i, n, degraded = [], 0, len(text), 0
	while i < n:
		ch = text[i]
		if ch != '\\' or i + 1 >= n:
			result.append(ch); i += 1
			continue
		nxt = text[i + 1]
		if nxt in NAMED_UNESCAPES:
			result.append(NAMED_UNESCAPES[nxt]); i += 2
			continue
		decoded = _read_hex_escape(text, i)
		if decoded is None:
			result.append('\\'); i += 1; degraded += 1
			continue
		code, consumed = decoded
		if recombine_surrogates and code in HIGH_SURROGATES:
			pair = _read_hex_escape(text, i + consumed)
			if pair is not None and pair[0] in LOW_SURROGATES:
				code, consumed = join_surrogates(code, pair[0]), consumed + pair[1]
		result.append(chr(code)); i += consumed
	if degraded: logger.debug("Kept %d malformed or unknown escape(s) literal while unescaping %d chars", degraded, n)
	return ''.join(result)

# Counting
# ------------------------------
def count_escapable(text: str, style=None) -> int:
	resolved = None if style is None else EscapeStyle.parse(style)
	return sum(1 for ch in text if needs_escape(ch, resolved))

encode, decode = escape, unescape
