r"""Fetchers dispatching request specifications over HTTP."""

from __future__ import annotations

__all__ = ["BaseFetcher", "Fetcher"]

from netrequest.fetcher.base import BaseFetcher
from netrequest.fetcher.fetcher import Fetcher
