"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or the working directory .env file.
"""
from __future__ import annotations
import os, sys

from settings import ENV_FILE, read_env_file

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = ('DDL_PRIMARY', 'DDL_GOOD', 'DDL_PASSABLE', 'DDL_POOR')

def _sgr(*params: object) -> str:
    """SGR escape sequence for ``params``, or '' while colour is off."""
    if not _ENABLE:
        return ''
    return "\033[" + ';'.join(str(p) for p in params) + "m"

def _rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[:2], 16), int(h[2:4], 16), int(h[4:], 16)

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _cube_index(r: int, g: int, b: int) -> int:
    """Nearest slot in the xterm 6x6x6 colour cube."""
    r6, g6, b6 = (int(round(c * 5 / 255)) for c in (r, g, b))
    return 16 + 36 * r6 + 6 * g6 + b6

def _fg(hex_code: str) -> str:
    """Foreground escape for a hex colour; 256-colour unless truecolor is advertised."""
    r, g, b = _rgb(hex_code)
    if _USE_TRUECOLOR:
        return _sgr(38, 2, r, g, b)
    return _sgr(38, 5, _cube_index(r, g, b))

RESET = _sgr(0)
BOLD = _sgr(1)
DIM = _sgr(2)

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_GOOD_DEFAULT = '#A7E399'
HEX_PASSABLE_DEFAULT = '#F6FF99'
HEX_POOR_DEFAULT = '#E06C75'

# .env overrides; malformed hex values are dropped
_ENV_OVERRIDES: dict[str, str] = {
    k: '#' + v.lstrip('#')
    for k, v in read_env_file(ENV_FILE).items()
    if k in PALETTE_KEYS and _is_hex(v)
}

def _resolve(key: str, default: str) -> str:
    """Priority: real env var > .env override > default."""
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)

HEX_PRIMARY = _resolve('DDL_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_GOOD = _resolve('DDL_GOOD', HEX_GOOD_DEFAULT)
HEX_PASSABLE = _resolve('DDL_PASSABLE', HEX_PASSABLE_DEFAULT)
HEX_POOR = _resolve('DDL_POOR', HEX_POOR_DEFAULT)

PRIMARY = _fg(HEX_PRIMARY)
C_GOOD = _fg(HEX_GOOD)
C_PASSABLE = _fg(HEX_PASSABLE)
C_POOR = _fg(HEX_POOR)

TIER_COLOR = {
    'good': C_GOOD,
    'passable': C_PASSABLE,
    'poor': C_POOR,
}

NAME_COLOR = PRIMARY
DAYS_COLOR = C_GOOD
DUE_COLOR = C_POOR
EMPTY_COLOR = DIM + PRIMARY

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','RESET','BOLD','DIM','TIER_COLOR','NAME_COLOR','DAYS_COLOR','DUE_COLOR','EMPTY_COLOR',
    'HEX_PRIMARY','HEX_GOOD','HEX_PASSABLE','HEX_POOR','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
