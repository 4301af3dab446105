"""
tapresolver - per-tap config and content resolution

Resolves, merges and materializes per-tenant ("tap") configuration and
content for a multi-tenant mobile app build.

tapresolver provides:
  - Active tap selection (argument > TAP env var > app.json name)
  - Tap folder discovery (local taps before external taps)
  - Deep merge of the tap's app.json over the root app.json
  - A merged config written to a temp folder for the build toolchain
  - Cached content resolution with base application fallback
  - Generated asset index modules

Quick Start
-----------
Validate the root config:

    $ tapresolver validate ./my-app

Set up a tap:

    $ tapresolver setup ./my-app --tap acme

For full CLI documentation:

    $ tapresolver --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    setup_tap orchestration.
config : package
    Root/tap config loading and deep merge.
taps : package
    Active tap location and effective config materialization.
resolver : package
    Cached content resolution.
assets : module
    Asset index generation.

Public API
----------
    from tapresolver.config import load_app_config
    from tapresolver.core import setup_tap
    from tapresolver.resolver import build_alias_map, make_resolver
    from tapresolver.assets import build_assets
"""

__version__ = "0.1.0"
__description__ = "Per-tap config and content resolution for multi-tenant app builds"

# Re-export commonly used functions for convenience
from tapresolver.assets import build_assets
from tapresolver.config import load_app_config
from tapresolver.core import setup_tap
from tapresolver.resolver import build_alias_map, make_resolver
from tapresolver.results import TapDescriptor

__all__ = [
    "__version__",
    "__description__",
    "TapDescriptor",
    "build_alias_map",
    "build_assets",
    "load_app_config",
    "make_resolver",
    "setup_tap",
]
