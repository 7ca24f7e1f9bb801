# setup_logging.py
# LLM NOTE: LLM Editor, follow these code style guidelines: (1) No docstrings or extra comments; (2) Retain the file path comment, LLM note, and grouping/separation markers exactly as is; (3) Favor concise single-line statements; (4) Preserve code structure and organization

import logging, os, portalocker, threading, colorlog
from datetime import datetime
from logging.handlers import BaseRotatingHandler

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")
if not hasattr(logging.Logger, 'success'): logging.Logger.success = lambda self, msg, *args, **kwargs: self.log(SUCCESS_LEVEL_NUM, msg, *args, **kwargs)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_COLORS = {'DEBUG': 'white', 'INFO': 'reset', 'SUCCESS': 'green', 'WARNING': 'yellow', 'ERROR': 'red', 'CRITICAL': 'bold_red'}

# Filters
# ------------------------------
class PreviewTruncationFilter(logging.Filter):
    def __init__(self, max_length=80):
        super().__init__()
        self.max_length = max_length
    def filter(self, record):
        if not self.max_length or self.max_length <= 0: return True
        message = record.getMessage()
        if len(message) > self.max_length:
            record.msg = message[:self.max_length].rstrip() + f"... [{len(message) - self.max_length} more chars]"
            record.args = ()
        return True

# Handlers
# ------------------------------
class DailyFileHandler(BaseRotatingHandler):
    def __init__(self, log_dir, log_prefix='escape', encoding=None, delay=False):
        self.log_dir = os.path.abspath(log_dir)
        self.log_prefix = log_prefix
        self.current_date_str = datetime.now().strftime('%Y-%m-%d')
        super().__init__(self._compute_filename(), 'a', encoding, delay)
        self._emit_lock = threading.RLock()
    def _compute_filename(self):
        path = os.path.join(self.log_dir, datetime.now().strftime('%Y-%m'))
        os.makedirs(path, exist_ok=True)
        return os.path.join(path, f"{self.log_prefix}.{self.current_date_str}.log")
    def shouldRollover(self, record): return datetime.now().strftime('%Y-%m-%d') != self.current_date_str
    def doRollover(self):
        if self.stream: self.stream.close(); self.stream = None
        self.current_date_str = datetime.now().strftime('%Y-%m-%d')
        self.baseFilename = self._compute_filename()
    def emit(self, record):
        with self._emit_lock:
            if self.shouldRollover(record): self.doRollover()
            if self.stream is None: self.stream = self._open()
            portalocker.lock(self.stream, portalocker.LOCK_EX)
            try: logging.FileHandler.emit(self, record)
            finally: portalocker.unlock(self.stream)

# Setup
# ------------------------------
def _build_handler(handler, log_level, preview_length, formatter):
    handler.setLevel(log_level)
    if preview_length: handler.addFilter(PreviewTruncationFilter(preview_length))
    handler.setFormatter(formatter)
    return handler

def setup_logging(log_path='logs', daily_rotation=True, log_level=logging.INFO, preview_length=80, log_to_file=True):
    logger = logging.getLogger()
    for h in list(logger.handlers): logger.removeHandler(h)
    logger.setLevel(log_level)
    if log_to_file:
        if daily_rotation: file_handler = DailyFileHandler(log_dir=log_path, log_prefix='escape', encoding='utf-8', delay=True)
        else:
            os.makedirs(log_path, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(log_path, 'escape.log'), encoding='utf-8', delay=True)
        logger.addHandler(_build_handler(file_handler, log_level, preview_length, logging.Formatter(LOG_FORMAT)))
    console_formatter = colorlog.ColoredFormatter('%(log_color)s' + LOG_FORMAT, log_colors=LOG_COLORS)
    logger.addHandler(_build_handler(logging.StreamHandler(), log_level, preview_length, console_formatter))
    logger.success("Logging initialized.")
    return logger
