"""Tagged call outcomes.

Each dispatcher step returns either a ``Success`` carrying a value or a
``Failure`` carrying the code and message to report, and the dispatcher
checks which one it got before running the next step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from wcrpc.domain.exceptions import RpcError


@dataclass(frozen=True)
class Success:
    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    code: int
    message: str

    @property
    def ok(self) -> bool:
        return False

    @staticmethod
    def from_error(exc: RpcError) -> Failure:
        return Failure(code=exc.code, message=exc.message)


Outcome = Union[Success, Failure]
