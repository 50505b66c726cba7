SAMPLE_SEED = 0
MAX_SAMPLE_TIME_MS = 3000
MAX_SAMPLE_CNT = 20000

SORTING_ALGORITHM_I = 2
INPUT_N = 6
USER_STATE_STORAGE_TYPE = "session"

DEMO_NUMS = [2, 4, 1, 0, 3, 5]
DEMO_HEAP_PUSHES = [1, 3, 2, 5, 4]
