FPS = 30
FIELD_W = 14
FIELD_H = 14
CELL_SIZE = 40
COLOR_COUNT = 6
ALLOWED_STEP_COUNT = 25

# Frames skipped between two diagonals of the reveal wave.
PAINT_WAIT = 1

# Anchor cell (row, col); the region rooted here is the one being repainted.
ANCHOR = (0, 0)

NO_COLOR = -1

# Sound keys are the basenames of the files under resources/sound.
SOUND_NG = "ng.wav"
SOUND_BRAVO = "bravo.wav"
SOUND_CRASH = "crash.wav"
