import sys, os

# Ensure src and the shared test helpers are on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
TESTS = os.path.dirname(__file__)
for path in (SRC, TESTS):
    if path not in sys.path:
        sys.path.insert(0, path)
