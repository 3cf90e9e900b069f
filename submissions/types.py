"""Shared type aliases for the submissions package."""

from __future__ import annotations

from typing import Any, Callable, Mapping

Record = Mapping[str, str]
RecordDict = dict[str, str]
ChannelResult = dict[str, Any]
ProcessingResult = dict[str, Any]
HandlerResult = dict[str, Any]

InsertRowFn = Callable[..., None]
SendEmailFn = Callable[..., None]
SendSMSFn = Callable[..., None]
