"""CarrierMatch — record of where discovery found a carrier."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi_request_context._types import ContextCarrier


@dataclass(frozen=True)
class CarrierMatch:
    """A carrier and the sub-component path leading to it from the handle."""

    carrier: ContextCarrier
    path: tuple[str, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.path)
