"""Customers state held in the Streamlit session.

``(state, payload) -> new state`` reducers; the previous state is untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from supportdesk.models import Customer


@dataclass(frozen=True)
class CustomerState:
    customers: Tuple[Customer, ...] = ()
    loading: bool = False
    error: Optional[str] = None


def set_customers(state: CustomerState, customers: Sequence[Customer]) -> CustomerState:
    return replace(state, customers=tuple(customers or ()), loading=False)


def set_loading(state: CustomerState) -> CustomerState:
    return replace(state, loading=True)


def set_error(state: CustomerState, error: str) -> CustomerState:
    return replace(state, error=error, loading=False)
