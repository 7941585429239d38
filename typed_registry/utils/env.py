import os
import re
from collections.abc import Mapping

_QUOTED_RE = re.compile(r"\A(['\"])(.*)\1\Z", re.DOTALL)

_TOKENS: dict[str, bool | str | None] = {
    "true": True,
    "(true)": True,
    "false": False,
    "(false)": False,
    "empty": "",
    "(empty)": "",
    "null": None,
    "(null)": None,
}


def fold_env_value(raw: str) -> bool | str | None:
    """Folds boolean/empty/null tokens and strips matching quotes."""
    token = raw.lower()
    if token in _TOKENS:
        return _TOKENS[token]
    m = _QUOTED_RE.match(raw)
    if m:
        return m.group(2)
    return raw


def read_env(name: str, environ: Mapping[str, str] | None = None) -> bool | str | None:
    """Reads an environment variable with token folding; None when unset."""
    source = environ if environ is not None else os.environ
    raw = source.get(name)
    if raw is None:
        return None
    return fold_env_value(raw)
