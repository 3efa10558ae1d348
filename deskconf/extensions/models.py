# -*- coding: utf-8 -*-
"""Pydantic data models for extensions (tool integrations)."""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class StdioConnection(BaseModel):
    """Extension launched as a child process speaking over stdio."""

    type: Literal["stdio"] = "stdio"
    cmd: str = Field(..., description="Executable to launch")
    args: List[str] = Field(default_factory=list)
    envs: Dict[str, str] = Field(default_factory=dict)


class SseConnection(BaseModel):
    """Extension reached over server-sent events."""

    type: Literal["sse"] = "sse"
    uri: str = Field(..., description="SSE endpoint")
    envs: Dict[str, str] = Field(default_factory=dict)


class BuiltinConnection(BaseModel):
    """Extension bundled with the agent."""

    type: Literal["builtin"] = "builtin"


ExtensionConnection = Annotated[
    Union[StdioConnection, SseConnection, BuiltinConnection],
    Field(discriminator="type"),
]


class ExtensionSpec(BaseModel):
    """An extension record as stored by the backend."""

    name: str = Field(..., description="Unique extension name")
    enabled: bool = True
    connection: ExtensionConnection = Field(
        default_factory=BuiltinConnection,
    )
    timeout: Optional[int] = Field(
        default=None,
        description="Seconds to wait for the extension to respond",
    )


class ExtensionRemoveQuery(BaseModel):
    name: str


class ExtensionEvent(BaseModel):
    """Published after a backend-confirmed extension transition."""

    action: Literal["added", "updated", "removed"]
    name: str
