"""
Derived views generated after the memo files are written.
"""

import logging
from typing import List, Optional

from ..models import FlomoCore, ImportSettings
from ..vault import Vault
from . import canvas, moments


def run_derived_views(core: FlomoCore, settings: ImportSettings, vault: Vault,
                      moments_limit: Optional[int] = None,
                      canvas_limit: Optional[int] = None,
                      canvas_columns: Optional[int] = None) -> List[str]:
    """
    Generate the Moments note and the canvas unless they are set to ``skip``.

    Each generator runs at most once. Limits left as None fall back to the
    global configuration.

    Returns:
        Vault-relative paths of the generated views
    """
    generated = []

    if settings.options_moments != "skip":
        generated.append(moments.generate_moments(core, settings, vault, limit=moments_limit))
    else:
        logging.info("Skipping Moments")

    if settings.options_canvas != "skip":
        generated.append(canvas.generate_canvas(core, settings, vault,
                                                limit=canvas_limit, columns=canvas_columns))
    else:
        logging.info("Skipping Canvas")

    return generated


__all__ = ["run_derived_views", "canvas", "moments"]
