# File: backslash_escape/models/escape_style.py
# LLM NOTE: LLM Editor, follow these code style guidelines: (1) No docstrings or extra comments; (2) Retain the file path comment, LLM note, and grouping/separation markers exactly as is; (3) Favor concise single-line statements; (4) Preserve code structure and organization.

from enum import Enum

# Errors
# ------------------------------
class UnknownEscapeStyleError(ValueError):
	def __init__(self, value):
		self.value = value
		super().__init__(f"Unknown escape style {value!r}; expected one of: {', '.join(s.value for s in EscapeStyle)}")

# Model: EscapeStyle
# ------------------------------
class EscapeStyle(str, Enum):
	JSON = "json"
	JAVASCRIPT = "javascript"
	PYTHON = "python"
	C = "c"

	def __str__(self): return self.value

	@classmethod
	def parse(cls, value):
		if isinstance(value, cls): return value
		if not isinstance(value, str): raise UnknownEscapeStyleError(value)
		try: return cls(value.strip().lower())
		except ValueError: raise UnknownEscapeStyleError(value) from None

	@property
	def escapes_single_quote(self) -> bool: return self in (EscapeStyle.PYTHON, EscapeStyle.C)

	@property
	def uses_surrogate_pairs(self) -> bool: return self in (EscapeStyle.JSON, EscapeStyle.JAVASCRIPT)
