from __future__ import annotations

import logging
import os

from pastebin_client import (
    PastebinClient,
    restore_client,
    set_debug,
    set_expire,
    set_session_key,
    set_visibility,
)
from pastebin_client.options import Option

from . import console
from .config import CliOptions

logger = logging.getLogger(__name__)


def _overrides(opts: CliOptions, *, with_session: bool = True) -> list[Option]:
    options: list[Option] = [set_expire(opts.expire), set_debug(opts.debug)]
    if opts.visibility:
        options.append(set_visibility(opts.visibility))
    if with_session and opts.session_key:
        options.append(set_session_key(opts.session_key))
    return options


def make_client(opts: CliOptions) -> PastebinClient:
    """Build the client for one invocation.

    --anonymous always gets a fresh guest client. Otherwise the saved client is
    restored when there is one; without it we fall back to a guest client.
    """
    if opts.anonymous:
        logger.debug("anonymous flag set, ignoring saved client")
        return PastebinClient(*_overrides(opts, with_session=False))

    if os.path.exists(opts.client_file):
        client = restore_client(opts.client_file)
        logger.debug("restored client from %s", opts.client_file)
    else:
        console.warn("client not configured, run 'pastebin setup' to paste with your user account")
        client = PastebinClient()
    client.update(*_overrides(opts))
    return client
