"""A user's borrow position and its value in other reserves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pandas as pd

from refi.data.constants import AAVE, DEFAULT_DECIMALS
from refi.protocol.pricing import from_wei

if TYPE_CHECKING:
    from refi.client import ReFi


@dataclass(frozen=True)
class BorrowPosition:
    """Outstanding debt of one user in one reserve."""

    protocol: str
    reserve: str
    user: str
    borrow_balance: int  # raw units of the reserve

    @classmethod
    def from_refi(
        cls,
        refi: ReFi,
        reserve: str,
        user: str | None = None,
        protocol: str = AAVE,
    ) -> "BorrowPosition":
        data = refi.get_user_reserve_data(reserve, user, protocol)
        return cls(
            protocol=protocol,
            reserve=reserve,
            user=user or refi.default_user or "",
            borrow_balance=data.current_borrow_balance,
        )

    @property
    def has_debt(self) -> bool:
        return self.borrow_balance > 0

    def equivalent_in(
        self,
        refi: ReFi,
        target: str,
        from_decimals: int = DEFAULT_DECIMALS,
        to_decimals: int = DEFAULT_DECIMALS,
    ) -> int:
        """Borrow balance expressed in ``target`` at current oracle prices."""
        if target == self.reserve:
            return self.borrow_balance
        return refi.get_equivalent_borrow_balance(
            self.reserve,
            target,
            self.borrow_balance,
            protocol=self.protocol,
            from_decimals=from_decimals,
            to_decimals=to_decimals,
        )


def equivalents_frame(
    position: BorrowPosition,
    refi: ReFi,
    targets: list[str],
    decimals: dict[str, int] | None = None,
) -> pd.DataFrame:
    """Tabulate the position's value in each target reserve.

    Args:
        position: The borrow position to convert.
        refi: ReFi used for oracle prices.
        targets: Reserve symbols or addresses to express the debt in.
        decimals: Optional token decimals per reserve (default 18).

    Returns:
        DataFrame with columns ``asset``, ``balance_wei`` and ``balance``.
    """
    decimals = decimals or {}
    from_dec = decimals.get(position.reserve, DEFAULT_DECIMALS)

    rows = []
    for target in targets:
        to_dec = decimals.get(target, DEFAULT_DECIMALS)
        raw = position.equivalent_in(refi, target, from_decimals=from_dec, to_decimals=to_dec)
        rows.append({"asset": target, "balance_wei": raw, "balance": from_wei(raw, to_dec)})

    return pd.DataFrame(rows, columns=["asset", "balance_wei", "balance"])
