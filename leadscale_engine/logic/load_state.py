# leadscale_engine/logic/load_state.py
"""
Loading / Error / Ready lifecycle of the session snapshot.

    Loading --FetchSucceeded--> Ready
    Loading --FetchFailed-----> Error
    Error   --RetryRequested--> Loading
    Ready   --RetryRequested--> Loading

Any other (state, event) pair leaves the state as it is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import pandas as pd


# ---------- States ----------
@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True, eq=False)
class Ready:
    snapshot: pd.DataFrame = field(default_factory=pd.DataFrame)


LoadState = Union[Loading, Error, Ready]


# ---------- Events ----------
@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True, eq=False)
class FetchSucceeded:
    snapshot: pd.DataFrame


@dataclass(frozen=True)
class FetchFailed:
    message: str


@dataclass(frozen=True)
class RetryRequested:
    pass


LoadEvent = Union[FetchStarted, FetchSucceeded, FetchFailed, RetryRequested]


def initial_state() -> LoadState:
    return Loading()


def reduce_load_state(state: LoadState, event: LoadEvent) -> LoadState:
    if isinstance(event, RetryRequested):
        return Loading()

    if not isinstance(state, Loading):
        return state

    if isinstance(event, FetchSucceeded):
        return Ready(snapshot=event.snapshot)
    if isinstance(event, FetchFailed):
        return Error(message=event.message or "Erro ao carregar dados")
    return state
