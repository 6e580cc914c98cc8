from __future__ import annotations

import argparse

from campusdesk.core.engine.evaluator import set_evaluator_debug
from campusdesk.core.engine.resolver import set_resolver_debug


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def install_engine_debug(args: argparse.Namespace) -> None:
    if not _debug_enabled(args):
        return
    set_evaluator_debug(lambda msg: _dbg(args, msg))
    set_resolver_debug(lambda msg: _dbg(args, msg))


def clear_engine_debug() -> None:
    set_evaluator_debug(None)
    set_resolver_debug(None)
