"""Optional backend capabilities for fe-core.

Bytecode output needs the solc backend, shipped as the ``solc-backend``
extra (``pip install fe-driver[solc-backend]`` installs py-solc-x).
Whether it is present is decided once per process, here, and handed to
the emitter as a plain boolean.
"""

from __future__ import annotations

import importlib.util
import logging
import os

logger = logging.getLogger(__name__)

# Environment variable forcing the solc backend capability on or off
SOLC_BACKEND_ENV_VAR = "FE_SOLC_BACKEND"

# Import name of the py-solc-x distribution
SOLC_BACKEND_MODULE = "solcx"

SOLC_BACKEND_EXTRA = "solc-backend"

BYTECODE_ADVISORY = (
    f"bytecode output requires the '{SOLC_BACKEND_EXTRA}' extra. "
    f"Try `pip install fe-driver[{SOLC_BACKEND_EXTRA}]`. Skipping."
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def solc_backend_available() -> bool:
    """Report whether bytecode can be produced in this installation.

    FE_SOLC_BACKEND, when set to a recognised boolean, wins over
    detection. Otherwise the capability is present iff ``solcx`` is
    importable.

    Returns:
        True if the solc backend capability is enabled.
    """
    override = os.environ.get(SOLC_BACKEND_ENV_VAR)
    if override is not None:
        value = override.strip().lower()
        if value in _TRUTHY:
            return True
        if value in _FALSY:
            return False
        logger.warning(
            "Ignoring unrecognised %s value %r",
            SOLC_BACKEND_ENV_VAR,
            override,
        )

    return importlib.util.find_spec(SOLC_BACKEND_MODULE) is not None
