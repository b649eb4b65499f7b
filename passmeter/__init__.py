"""PassMeter -- live password strength feedback.

Core functions for loading the common-password blacklist and evaluating a
candidate password: character-class criteria, entropy estimate, strength
label and blacklist membership.
"""

import logging
import math
import re

import requests

from passmeter import config

log = logging.getLogger(__name__)


# ── Blacklist loading ──────────────────────────────────────────────────────

DEGRADED_MESSAGE = "Error loading common passwords. Strength checking limited."


def parse_blacklist(text: str) -> frozenset[str]:
    """Turn newline-delimited *text* into a case-insensitive lookup set.

    Entries are trimmed and lowercased.  Blank lines are dropped so that the
    empty password can never match.
    """
    entries = (line.strip().lower() for line in text.splitlines())
    return frozenset(entry for entry in entries if entry)


def _read_source(source: str, timeout: float) -> str:
    if source.startswith(("http://", "https://")):
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        return resp.text

    with open(source, encoding="utf-8") as f:
        return f.read()


def load_blacklist(source: str | None = None, *, timeout: float | None = None) -> dict:
    """Load the common-password blacklist from a URL or a local file.

    Never raises.  Returns a dict with keys:
        passwords -- frozenset[str]  (empty when the load failed)
        source    -- str
        degraded  -- bool  (True when blacklist checking is unavailable)
        error     -- str | None
    """
    if source is None:
        source = config.BLACKLIST_SOURCE
    if timeout is None:
        timeout = config.FETCH_TIMEOUT

    try:
        text = _read_source(str(source), timeout)
    except (requests.RequestException, OSError, ValueError) as exc:
        log.warning("Failed to load common passwords from %s: %s", source, exc)
        return {
            "passwords": frozenset(),
            "source": str(source),
            "degraded": True,
            "error": f"{type(exc).__name__}: {exc}",
        }

    passwords = parse_blacklist(text)
    log.info("Loaded %d common passwords from %s", len(passwords), source)
    return {
        "passwords": passwords,
        "source": str(source),
        "degraded": False,
        "error": None,
    }


# ── Strength evaluation ────────────────────────────────────────────────────

MIN_LENGTH = 8

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
# Anything that is not an ASCII letter or digit, whitespace included.
_SPECIAL = re.compile(r"[^A-Za-z0-9]")

# Class sizes used for the charset estimate.  Special is a fixed
# approximation, not a count of the symbols actually used.
CHARSET_SIZES = {
    "lowercase": 26,
    "uppercase": 26,
    "number": 10,
    "special": 32,
}

# Checked from the top, first match wins.
ENTROPY_THRESHOLDS = [
    (128, "Very Strong"),
    (60, "Strong"),
    (36, "Moderate"),
    (28, "Weak"),
]
LOWEST_LABEL = "Very Weak"

EMPTY_MESSAGE = "Enter a password"


def check_criteria(password: str) -> dict[str, bool]:
    """Return which of the five criteria *password* satisfies."""
    return {
        "length": len(password) >= MIN_LENGTH,
        "uppercase": bool(_UPPER.search(password)),
        "lowercase": bool(_LOWER.search(password)),
        "number": bool(_DIGIT.search(password)),
        "special": bool(_SPECIAL.search(password)),
    }


def charset_size(password: str) -> int:
    """Sum of the class sizes of every character class present."""
    criteria = check_criteria(password)
    return sum(size for name, size in CHARSET_SIZES.items() if criteria[name])


def calculate_entropy(password: str) -> int:
    """Estimate entropy in bits, rounded to the nearest integer.

    Assumes a uniformly random password of the same length drawn from the
    detected character classes: ``length * log2(charset_size)``.
    """
    pool = charset_size(password)
    if pool == 0 or not password:
        return 0
    bits = len(password) * math.log2(pool)
    # half-up, never banker's rounding
    return math.floor(bits + 0.5)


def entropy_label(bits: int) -> str:
    for threshold, label in ENTROPY_THRESHOLDS:
        if bits >= threshold:
            return label
    return LOWEST_LABEL


def is_blacklisted(password: str, blacklist: frozenset[str] | set[str]) -> bool:
    """Case-insensitive blacklist lookup.  The empty password never matches."""
    return bool(password) and password.lower() in blacklist


def evaluate(password: str, blacklist: frozenset[str] | set[str] = frozenset()) -> dict:
    """Evaluate *password* and return a report for a presentation layer.

    Returns a dict with keys:
        password_length -- int
        criteria        -- dict[str, bool]  (length, uppercase, lowercase,
                           number, special)
        score           -- int 0-5  (number of satisfied criteria)
        charset_size    -- int
        entropy         -- int (bits)
        label           -- str  (entropy-based, independent of score)
        blacklisted     -- bool
        message         -- str  (status line to show the user)

    The criteria score and the entropy label are reported side by side and
    may disagree.
    """
    criteria = check_criteria(password)
    score = sum(criteria.values())
    pool = charset_size(password)
    entropy = calculate_entropy(password)
    label = entropy_label(entropy)
    blacklisted = is_blacklisted(password, blacklist)

    if not password:
        message = EMPTY_MESSAGE
    elif blacklisted:
        message = f"⚠️ This password is too common! ({entropy} bits)"
    else:
        message = f"Strength: {label} ({entropy} bits)"

    return {
        "password_length": len(password),
        "criteria": criteria,
        "score": score,
        "charset_size": pool,
        "entropy": entropy,
        "label": label,
        "blacklisted": blacklisted,
        "message": message,
    }
