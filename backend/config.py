import os

class Config:
    # Viewer command listener
    LISTEN_HOST = os.environ.get('LISTEN_HOST') or '0.0.0.0'
    LISTEN_PORT = int(os.environ.get('LISTEN_PORT', '8000'))
    # Letter bank and word buffer limits
    BANK_SIZE = int(os.environ.get('BANK_SIZE', '14'))
    WORD_MAXLEN = int(os.environ.get('WORD_MAXLEN', '24'))
    MIN_WORD_LENGTH = int(os.environ.get('MIN_WORD_LENGTH', '3'))
    # Render/input loop interval (ms)
    TICK_MS = int(os.environ.get('TICK_MS', '16'))
    DICTIONARY_PATH = os.environ.get('DICTIONARY_PATH') or '/usr/share/dict/words'
    # Set to 0 to give every letter zero points
    SCORED_LETTERS = os.environ.get('SCORED_LETTERS', '1') != '0'
    # curses owns the terminal, so logs go to a file
    LOG_FILE = os.environ.get('LOG_FILE') or 'letterbank.log'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
