"""Global configuration for SecretRecovery."""

import os

# ---------- Radix alphabet ----------
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)  # 36

# ---------- Case files ----------
# SECRETRECOVERY_CASE_FILES overrides the defaults (os.pathsep separated).
_CASE_FILES_ENV = os.environ.get("SECRETRECOVERY_CASE_FILES", "")
CASE_FILES = (
    [p for p in _CASE_FILES_ENV.split(os.pathsep) if p]
    if _CASE_FILES_ENV
    else [os.path.join("cases", "tc1.json"), os.path.join("cases", "tc2.json")]
)

# ---------- Reconstruction ----------
MODE_ROBUST = "robust"   # majority vote over every k-subset
MODE_SIMPLE = "simple"   # first k shares only
MODE = os.environ.get("SECRETRECOVERY_MODE", MODE_ROBUST)

# C(n, k) grows combinatorially; robust mode refuses to enumerate more
# subsets than this.  0 disables the gate.
ROBUST_SUBSET_LIMIT = int(os.environ.get("SECRETRECOVERY_SUBSET_LIMIT", "100000"))

# ---------- Reporting ----------
OUTPUT_TEXT = "text"
OUTPUT_JSON = "json"
OUTPUT_FORMAT = os.environ.get("SECRETRECOVERY_OUTPUT", OUTPUT_TEXT)
CONTINUE_ON_ERROR = os.environ.get("SECRETRECOVERY_CONTINUE_ON_ERROR", "1").lower() not in ("0", "false", "no")
LOG_LEVEL = os.environ.get("SECRETRECOVERY_LOG_LEVEL", "WARNING").upper()

# ---------- Demo share generation ----------
DEMO_SECRET = 1234567890123456789
DEMO_NUM_SHARES = 6
DEMO_THRESHOLD = 3
DEMO_COEFF_BOUND = 2**64
