LINE_MODE = "line"
WORD_MODE = "word"
MODES = (LINE_MODE, WORD_MODE)

MAX_UNIT_BYTES = 4096         # Longest line or word held in memory at once
READ_CHUNK_BYTES = 8192
