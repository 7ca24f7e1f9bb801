# File: backslash_escape/config.py
# LLM NOTE: LLM Editor, follow these code style guidelines: (1) No docstrings or extra comments; (2) Retain the file path comment, LLM note, and grouping/separation markers exactly as is; (3) Favor concise single-line statements; (4) Preserve code structure and organization.

import os, configparser, random, string, logging
from libs.logging_setup.setup_logging import SUCCESS_LEVEL_NUM
from backslash_escape.models.escape_style import EscapeStyle, UnknownEscapeStyleError

# Constants & Configuration
# ------------------------------
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_FILE = os.path.join(BASE_DIR, 'config.ini')
DATA_DIR = os.path.join(BASE_DIR, "data")
LOG_PATH = os.path.join(DATA_DIR, "logs")
INSTANCE_ID = f"{os.getpid()}-{''.join(random.choices(string.ascii_lowercase + string.digits, k=6))}"
LOG_LEVELS = {'DEBUG': logging.DEBUG, 'INFO': logging.INFO, 'SUCCESS': SUCCESS_LEVEL_NUM, 'WARNING': logging.WARNING, 'ERROR': logging.ERROR, 'CRITICAL': logging.CRITICAL}

# Configurable Settings (with defaults)
DEFAULT_STYLE = EscapeStyle.JSON
RECOMBINE_SURROGATES = True
LOG_LEVEL = logging.INFO
DAILY_ROTATION = True
LOG_TO_FILE = True
PREVIEW_LENGTH = 80

# App Setup & Initialization
# ------------------------------
def reset_config():
	global DEFAULT_STYLE, RECOMBINE_SURROGATES, LOG_LEVEL, DAILY_ROTATION, LOG_TO_FILE, PREVIEW_LENGTH
	DEFAULT_STYLE, RECOMBINE_SURROGATES, LOG_LEVEL, DAILY_ROTATION, LOG_TO_FILE, PREVIEW_LENGTH = EscapeStyle.JSON, True, logging.INFO, True, True, 80

def load_config(config_path=None):
	config_path = config_path or CONFIG_FILE
	config = configparser.ConfigParser()
	if not os.path.exists(config_path): logging.getLogger(__name__).debug("No config file at %s, using defaults.", config_path); return False
	global DEFAULT_STYLE, RECOMBINE_SURROGATES, LOG_LEVEL, DAILY_ROTATION, LOG_TO_FILE, PREVIEW_LENGTH
	try:
		config.read(config_path, encoding='utf-8')
		recombine = config.getboolean('Escape', 'RECOMBINE_SURROGATES', fallback=True)
		daily_rotation = config.getboolean('Logging', 'DAILY_ROTATION', fallback=True)
		log_to_file = config.getboolean('Logging', 'LOG_TO_FILE', fallback=True)
		preview_length = config.getint('Logging', 'PREVIEW_LENGTH', fallback=80)
		style_name, level_name = config.get('Escape', 'DEFAULT_STYLE', fallback='json'), config.get('Logging', 'LOG_LEVEL', fallback='INFO').strip().upper()
	except (configparser.Error, ValueError) as e: logging.warning("Could not parse %s, using defaults. Error: %s", config_path, e); return False
	try: default_style = EscapeStyle.parse(style_name)
	except UnknownEscapeStyleError as e: logging.warning("Invalid DEFAULT_STYLE in %s, using json. Error: %s", config_path, e); default_style = EscapeStyle.JSON
	if level_name in LOG_LEVELS: log_level = LOG_LEVELS[level_name]
	else: logging.warning("Invalid LOG_LEVEL %r in %s, using INFO.", level_name, config_path); log_level = logging.INFO
	DEFAULT_STYLE, RECOMBINE_SURROGATES, LOG_LEVEL, DAILY_ROTATION, LOG_TO_FILE, PREVIEW_LENGTH = default_style, recombine, log_level, daily_rotation, log_to_file, preview_length
	return True

def ensure_data_dirs():
	os.makedirs(LOG_PATH, exist_ok=True)

class InstanceLogAdapter(logging.LoggerAdapter):
	def process(self, msg, kwargs): return f"[{self.extra['instance_id']}] {msg}", kwargs
	def success(self, msg, *args, **kwargs): self.log(SUCCESS_LEVEL_NUM, msg, *args, **kwargs)

def get_logger(name):
	logger = logging.getLogger(name)
	return InstanceLogAdapter(logger, {'instance_id': INSTANCE_ID})

def initialize_logging(log_path=None):
	from libs.logging_setup.setup_logging import setup_logging
	if LOG_TO_FILE and log_path is None: ensure_data_dirs()
	return setup_logging(log_path=log_path or LOG_PATH, daily_rotation=DAILY_ROTATION, log_level=LOG_LEVEL, preview_length=PREVIEW_LENGTH, log_to_file=LOG_TO_FILE)

load_config()
